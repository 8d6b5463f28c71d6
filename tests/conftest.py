"""Shared test fixtures."""

import pytest

from inliner import SvgInliner

EMPTY_GROUP_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><g/></svg>'

ID_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><g id="test" /></svg>'

EXTERNAL_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 50 50"><g id="main"/></svg>'

EXTERNAL_TWO_IDS_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 50 50">'
    '<g id="main"/><g id="second-main" /></svg>'
)

EXTERNAL_NO_ID_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 50 50"><g /></svg>'

ARROW_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor">
  <!-- arrow-left, 24px grid -->
  <path d="M19 12H5"/>
  <path d="M12 19l-7-7 7-7"/>
</svg>'''

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10" fill="transparent" stroke="currentColor"/>
</svg>'''

XLINK_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10">'
    '<defs><path id="dot" d="M5 5h1"/></defs><use xlink:href="#dot"/></svg>'
)


@pytest.fixture
def inliner() -> SvgInliner:
    return SvgInliner()


@pytest.fixture
def inline_inliner() -> SvgInliner:
    return SvgInliner(exclude_from_concatenation=True)


@pytest.fixture
def icon_dir(tmp_path):
    d = tmp_path / "icons"
    d.mkdir()
    (d / "Arrow Left.svg").write_text(ARROW_SVG)
    (d / "circle.svg").write_text(CIRCLE_SVG)
    return d
