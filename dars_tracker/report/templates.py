# --- Page Shell (Common to all pages) ---
PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
  <link rel="stylesheet" href="https://maxcdn.bootstrapcdn.com/bootstrap/3.3.7/css/bootstrap.min.css">
</head>
<body>
<div class="container">
  <h1>{title}</h1>
{form}
{report}
</div>
<script>
function toggleSection(id) {{
  var el = document.getElementById(id);
  if (el) {{ el.style.display = (el.style.display === 'none') ? 'block' : 'none'; }}
}}
</script>
</body>
</html>
"""

# --- Paste Form ---
FORM_TEMPLATE = """  <form method="post" action="/">
    <div class="form-group">
      <label for="DARSreport">Paste your DARS report</label>
      <textarea class="form-control" id="DARSreport" name="DARSreport" rows="12">{report_text}</textarea>
    </div>
    <button type="submit" class="btn btn-primary">Summarize</button>
  </form>"""

# --- Credit & GPA Summary ---
CREDIT_SUMMARY_TEMPLATE = """  <h2>Credit Summary</h2>
  <table class="table table-bordered credit-summary">
    <thead><tr><th></th><th>Earned</th><th>In Progress</th><th>Needed</th></tr></thead>
    <tbody>
      <tr><th>Total</th><td>{total_earned}</td><td>{total_in_progress}</td><td>{total_needed}</td></tr>
      <tr><th>Upper Division</th><td>{upper_div_earned}</td><td>{upper_div_in_progress}</td><td>{upper_div_needed}</td></tr>
    </tbody>
  </table>"""

GPA_SUMMARY_TEMPLATE = """  <h2>GPA</h2>
  <ul class="list-unstyled gpa-summary">
    <li style="{cumulative_style}"><span class="{cumulative_icon}"></span> Cumulative GPA: {cumulative_gpa}</li>
    <li style="{major_style}"><span class="{major_icon}"></span> Major GPA: {major_gpa}</li>
  </ul>"""

# --- Requirement Lists ---
REQUIREMENT_LIST_TEMPLATE = """  <h2>{heading}</h2>
  <ul class="list-group">
{items}
  </ul>"""

REQUIREMENT_ITEM_TEMPLATE = """    <li class="list-group-item {panel_class}"><span class="{icon_class}"></span> {text}</li>"""

EMPTY_LIST_TEMPLATE = """    <li class="list-group-item">None found.</li>"""

# --- Verbose Sections ---
VERBOSE_SECTION_TEMPLATE = """  <div class="panel {panel_class}">
    <div class="panel-heading" onclick="toggleSection('{anchor}')">
      <span class="{icon_class}"></span> {heading}
    </div>
    <div class="panel-body" id="{anchor}" style="display: none"><pre>{body}</pre></div>
  </div>"""
