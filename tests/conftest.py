"""Shared fixtures: markup in the shape the table renderer produces."""

import pytest

GT_HTML = """<div id="abcdef" style="padding-left:0px;padding-right:0px;overflow-x:auto;">
<style>
@import url("https://fonts.googleapis.com/css2?family=IBM+Plex+Mono&display=swap");
html {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
}

#abcdef .gt_table {
  display: table;
  border-collapse: collapse;
}

#abcdef .gt_heading, .gt_col_heading {
  background-color: #FFFFFF;
}

 thead, tbody, tfoot { border-style: none; }

/* narrow screens */
@media (max-width: 600px) {
  .gt_row { padding: 2px; }
}
</style>
<table class="gt_table" data-quarto-disable-processing="false" data-quarto-bootstrap="false">
<thead>
  <tr class="gt_col_headings">
    <th class="gt_col_heading gt_columns_bottom_border gt_left" rowspan="1" colspan="1" scope="col" id="name">name</th>
    <th class="gt_col_heading gt_columns_bottom_border gt_right" rowspan="1" colspan="1" scope="col" id="price">price</th>
  </tr>
</thead>
<tbody class="gt_table_body">
  <tr>
    <td class="gt_row gt_left">html { color: red; }</td>
    <td class="gt_row gt_right">$1.50</td>
  </tr>
</tbody>
</table>
</div>
"""


@pytest.fixture
def gt_html() -> str:
    return GT_HTML
