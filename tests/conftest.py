import pytest

from faleproxy.model import WordRule

SAMPLE_HTML_WITH_YALE = """<!DOCTYPE html>
<html>
<head>
  <title>Yale University Test Page</title>
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body>
  <header>
    <h1>Welcome to Yale University</h1>
    <nav>
      <ul>
        <li><a href="https://www.yale.edu/about">About Yale</a></li>
        <li><a href="https://www.yale.edu/admissions">Yale Admissions</a></li>
      </ul>
    </nav>
  </header>
  <main>
    <p>Yale University is a private Ivy League research university in New Haven, Connecticut.</p>
    <p>Founded in 1701, YALE is the third-oldest institution of higher education in the United States.</p>
    <img src="https://www.yale.edu/images/logo.png" alt="Yale Logo">
  </main>
  <script>var yale = "Yale";</script>
  <style>.yale { color: blue; }</style>
  <!-- Yale comment -->
</body>
</html>
"""


@pytest.fixture
def rule():
    return WordRule(target="yale", replacement="fale")


@pytest.fixture
def sample_html():
    return SAMPLE_HTML_WITH_YALE
