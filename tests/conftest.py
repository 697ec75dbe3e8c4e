"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Add source directory to Python path for imports
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))


@pytest.fixture
def sample_page_html():
    """Rendered page with one lyrics block, one instrument block and prose"""
    return """<html>
<body>
<div class="md-content__inner md-typeset">
<h1>Test Song</h1>
<p>{lyrics}
[C]Hello [Am]world
{明日|あした}へ</p>
<p>Just prose with a [C] in it</p>
<p>{instrument}
[G]  [D7]</p>
</div>
<p>{lyrics}
[C]outside the content</p>
</body>
</html>
"""


@pytest.fixture
def page_without_blocks():
    """Rendered page with nothing to convert"""
    return """<html>
<body>
<div class="md-content__inner md-typeset">
<p>Nothing to see here</p>
</div>
</body>
</html>
"""
