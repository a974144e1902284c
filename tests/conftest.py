# ABOUTME: Shared fixtures: a representative Fandom book page, a parser helper
# ABOUTME: and a structlog event capture

import pytest
import structlog
from structlog.testing import capture_logs

from fandom_folio.extraction.document import parse_document
from fandom_folio.utils.logging import ensure_stderr_default

BOOK_PAGE_HTML = """
<html>
<body>
<h1 class="page-header__title" id="firstHeading">The Silver Tide</h1>
<div class="mw-parser-output">
  <aside role="complementary" class="portable-infobox pi-theme-book">
    <h2 class="pi-item pi-title" data-source="title">The Silver Tide</h2>
    <figure class="pi-item pi-image" data-source="image">
      <a href="https://static.wikia.nocookie.net/tides/images/a/ab/Silver_Tide_cover.jpg/revision/latest?cb=20200101"
         class="image image-thumbnail">
        <img src="data:image/gif;base64,R0lGODlhAQABAIABAAAAAP"
             data-src="https://static.wikia.nocookie.net/tides/images/a/ab/Silver_Tide_cover.jpg/revision/latest/scale-to-width-down/268?cb=20200101"
             class="pi-image-thumbnail" alt="Cover" />
      </a>
    </figure>
    <div class="pi-item pi-data" data-source="author">
      <h3 class="pi-data-label">Author</h3>
      <div class="pi-data-value pi-font"><a href="/wiki/Jane_Doe">Jane Doe</a></div>
    </div>
    <div class="pi-item pi-data" data-source="cover_artist">
      <h3 class="pi-data-label">Cover artist</h3>
      <div class="pi-data-value pi-font">Ann<br/>Smith</div>
    </div>
    <div class="pi-item pi-data" data-source="genre">
      <h3 class="pi-data-label">Genre</h3>
      <div class="pi-data-value pi-font">Fantasy<hr/>Adventure</div>
    </div>
    <div class="pi-item pi-data" data-source="publisher">
      <h3 class="pi-data-label">Publisher</h3>
      <div class="pi-data-value pi-font">  Harbor   House  </div>
    </div>
    <div class="pi-item pi-data" data-source="publication_date">
      <h3 class="pi-data-label">Publication date</h3>
      <div class="pi-data-value pi-font">March 3, 2011</div>
    </div>
    <div class="pi-item pi-data" data-source="pages">
      <h3 class="pi-data-label">Pages</h3>
      <div class="pi-data-value pi-font">352</div>
    </div>
    <div class="pi-item pi-data" data-source="preceded_by">
      <h3 class="pi-data-label">Preceded by</h3>
      <div class="pi-data-value pi-font"><i>The Copper Shore</i></div>
    </div>
    <h3 class="pi-data-label">Followed by</h3>
    <div class="pi-data-value pi-font"><i>The Golden Reef</i></div>
  </aside>
  <p>The Silver Tide is the second novel in the Tides series.</p>
  <h2><span class="mw-headline" id="Plot_summary">Plot summary</span><span class="mw-editsection">[edit]</span></h2>
  <p>Mara leaves the harbor.</p>
  <figure class="thumb"><img src="https://static.wikia.nocookie.net/tides/images/map.png" /></figure>
  <p>She finds   the <b>reef</b>.</p>
  <h3><span class="mw-headline" id="Ending">Ending</span></h3>
  <p>The tide turns.</p>
  <h2><span class="mw-headline" id="Characters">Characters</span></h2>
  <ul>
    <li>Mara</li>
    <li> Old Tomas </li>
    <li>The <a href="/wiki/Harbor_Master">Harbor Master</a></li>
  </ul>
  <ul>
    <li>Minor sailor</li>
  </ul>
  <h2><span class="mw-headline" id="Locations">Locations</span></h2>
  <p>Places visited:</p>
  <ol>
    <li>Port Vell</li>
    <li>The Silver Reef</li>
  </ol>
  <h2><span class="mw-headline" id="References">References</span></h2>
  <ul><li>Tides official site</li></ul>
</div>
</body>
</html>
"""


@pytest.fixture
def book_page_html() -> str:
    return BOOK_PAGE_HTML


@pytest.fixture
def book_page(book_page_html):
    return parse_document(book_page_html)


@pytest.fixture
def parse():
    """Parse an HTML fragment into a document."""
    return parse_document


@pytest.fixture
def captured_logs():
    """Structlog events emitted during the test, unfiltered by any earlier level setting."""
    structlog.reset_defaults()
    with capture_logs() as logs:
        yield logs
    structlog.reset_defaults()
    ensure_stderr_default()
