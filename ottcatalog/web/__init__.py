"""
Interface web de l'add-on (FastAPI).
"""
