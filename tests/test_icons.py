from aminpur.icons import ColorName, IconName, glyph_for, resolve_color, resolve_icon


def test_known_names_resolve():
    assert resolve_icon("Stethoscope") is IconName.STETHOSCOPE
    assert resolve_color("bg-red-500") is ColorName.RED


def test_unknown_names_fall_back_to_sentinel():
    assert resolve_icon("Rocket") is IconName.UNKNOWN
    assert resolve_icon(None) is IconName.UNKNOWN
    assert resolve_icon("Unknown") is IconName.UNKNOWN
    assert resolve_color("bg-pink-900") is ColorName.UNKNOWN
    assert glyph_for("whatever") == "❔"
