"""
Pages HTML minimales reproduisant la structure des pages scrapees.
"""

# Listing de plateforme avec cartes .content-item
PLATFORM_LISTING_HTML = """
<html><body>
  <div class="grid">
    <div class="content-item">
      <a href="/movie/rrr"><img src="/posters/rrr.jpg" alt="RRR"></a>
      <h3>RRR</h3>
      <p class="description">Two revolutionaries.</p>
      <span class="genre">Action, Drama</span>
      <span class="year">2022</span>
    </div>
    <div class="content-item">
      <a href="https://www.aha.video/movie/kantara"><img data-src="https://cdn.aha.video/kantara.jpg"></a>
      <div class="title">Kantara (2022)</div>
      <span class="release-date">Released 2022</span>
    </div>
    <div class="content-item">
      <img src="//cdn.aha.video/untitled.jpg" alt="Jersey">
    </div>
    <div class="content-item">
      <p class="description">No title and no poster.</p>
    </div>
  </div>
</body></html>
"""

# Listing dont seules les cartes generiques .card sont presentes
CARD_ONLY_HTML = """
<html><body>
  <section>
    <div class="card"><h3>Vikram</h3><img src="/v.jpg"></div>
    <div class="card"><h3>Leo</h3><img src="/l.jpg"></div>
  </section>
</body></html>
"""

NO_CARDS_HTML = "<html><body><p>Enable JavaScript to continue.</p></body></html>"

FLIXPATROL_HTML = """
<html><body>
  <div class="content">
    <div class="title"><h3>TOP 10 Movies</h3></div>
    <table class="card-table">
      <tbody>
        <tr class="table-group"><td>1.</td><td></td><td><a href="/title/kalki-2898-ad/">Kalki 2898 AD</a></td></tr>
        <tr class="table-group"><td>2.</td><td></td><td><a href="/title/maharaja/">Maharaja</a></td></tr>
        <tr class="table-group"><td>3.</td><td></td><td><a href="/title/empty/"> </a></td></tr>
      </tbody>
    </table>
  </div>
  <div class="content">
    <div class="title"><h3>TOP 10 TV Shows</h3></div>
    <table class="card-table">
      <tbody>
        <tr class="table-group"><td>1.</td><td></td><td><a href="/title/kota-factory/">Kota Factory</a></td></tr>
      </tbody>
    </table>
  </div>
</body></html>
"""

FLIXPATROL_WITHOUT_SECTIONS_HTML = """
<html><body><h3>Popular today</h3><table><tr><td>nothing</td></tr></table></body></html>
"""
