from core.analysis import analysis_paragraphs, analysis_to_html

SAMPLE = """**TL;DR: The Bottom Line**
Moving raises your payment by about $2,700 a month.

💰 **Cash Flow Impact**: Your budget tightens.
- Payment rises
- Savings rate falls

📊 **Debt-to-Income (DTI) Analysis**: Above 43%.
### Extra Notes
This is an AI-generated analysis, not financial advice.
"""


def test_known_markers_become_headings():
    out = analysis_to_html(SAMPLE)
    assert '<h2 class="analysis-tldr"><strong>TL;DR: The Bottom Line</strong></h2>' in out
    assert '<h3 class="analysis-section">💰 <strong>Cash Flow Impact</strong>: Your budget tightens.</h3>' in out
    assert '<h3 class="analysis-section">Extra Notes</h3>' in out
    assert 'class="analysis-disclaimer"' in out


def test_bullets_are_grouped_into_one_list():
    out = analysis_to_html(SAMPLE)
    assert out.count("<ul>") == 1 and out.count("</ul>") == 1
    assert "<li>Payment rises</li>\n<li>Savings rate falls</li>" in out


def test_unstructured_text_degrades_to_paragraphs():
    out = analysis_to_html("Just a sentence.\n\nAnother one.")
    assert out == "<p>Just a sentence.</p>\n<p>Another one.</p>"
    assert analysis_to_html("") == ""


def test_trailing_list_is_closed_and_html_escaped():
    out = analysis_to_html("- <script>x</script>")
    assert out == "<ul>\n<li>&lt;script&gt;x&lt;/script&gt;</li>\n</ul>"


def test_pdf_paragraphs_use_reportlab_bold():
    paras = analysis_paragraphs("**Bold** & plain\n\n next ")
    assert paras == ["<b>Bold</b> &amp; plain", "next"]


def test_pdf_paragraphs_drop_section_emoji():
    paras = analysis_paragraphs("💰 **Cost**\n⚠️ Risks\n⚠ Bare\n✨ Upside")
    assert paras == ["<b>Cost</b>", "Risks", "Bare", "Upside"]
