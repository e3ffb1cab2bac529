"""
Routes du protocole Stremio.
"""
