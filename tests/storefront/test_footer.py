from ecom.storefront.footer import COPYRIGHT, render_footer


def test_footer_has_border_and_centred_copyright():
    lines = render_footer(60).split("\n")
    assert lines[0] == "-" * 60
    assert lines[2].strip() == COPYRIGHT
    assert len(lines[2]) == 60


def test_copyright_text():
    assert COPYRIGHT == "© 2023 ALL GOOD's Inc , All rights reserved."
