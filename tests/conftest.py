from __future__ import annotations

import pytest


HEADER_ROWS = """
<tr><th>ELEMENT</th><th>PERFORMANCE CRITERIA</th></tr>
<tr><td><p>Elements describe the essential outcomes.</p></td>
    <td><p>Performance criteria describe the performance needed.</p></td></tr>
"""

DATA_ROWS = """
<tr>
  <td><p>1. Identify safety requirements</p></td>
  <td>
    <p>1.1 Locate and interpret safety documentation</p>
    <p>1.2 Identify   hazards
       in the workplace</p>
  </td>
</tr>
<tr>
  <td><p>2. Apply safety requirements</p></td>
  <td>
    <p>2.1 Apply safe work practices</p>
    <p>2.2 Report incidents</p>
    <p>2.3 Complete records</p>
  </td>
</tr>
"""


def build_page(
    heading: str = "UEERE0035 - Define and apply electrical safety requirements (Release 2)",
    rows: str = HEADER_ROWS + DATA_ROWS,
    wrapper: bool = True,
) -> str:
    body = f"""
<h1>Unit of competency details</h1>
<h2>{heading}</h2>
<p>Some unrelated text.</p>
<h2>Elements and Performance Criteria</h2>
<table>
<tbody>
{rows}
</tbody>
</table>
<h2>Foundation Skills</h2>
"""
    if wrapper:
        body = f'<div id="layoutContentWrapper">{body}</div>'
    return f"<html><head><title>Training</title></head><body><nav><h1>Menu</h1></nav>{body}</body></html>"


@pytest.fixture
def unit_html() -> str:
    return build_page()


@pytest.fixture
def page_builder():
    return build_page
