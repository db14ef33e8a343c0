from themegen.gui import shadows as S


def test_pseudo_3d_border_formats_numbers_like_css():
    assert S.pseudo_3d_border(0, 0.4, 0.8, "000000", "40") == "0px 0.4px 0 0.8px #00000040"
    assert S.pseudo_3d_border(0.0, -0.33, 1.0, "ffffff", "30") == "0px -0.33px 0 1px #ffffff30"


def test_p3d_defaults():
    assert S.light_p3d() == "0px 0.4px 0 0.8px #00000040"
    assert S.dark_p3d() == "0px -0.33px 0 1px #ffffff30"
    assert S.light_p3d("30", 0.5, 0, 1) == "0px 0.5px 0 1px #00000030"
    assert S.dark_p3d("55") == "0px -0.33px 0 1px #ffffff55"


def test_render_fix_defaults():
    assert S.light_ffrf() == "0 0 0 1px #00000012"
    assert S.dark_ffrf() == "0 0 0 1px #ffffff15"
    assert S.ff_render_fix("20", "abcdef") == "0 0 0 1px #abcdef20"


def test_inset_and_join_preserve_order():
    value = S.join_shadows(S.inset("a"), "b", S.inset("c"))
    assert value == "a inset, b, c inset"
    assert S.join_shadows("only") == "only"


def test_no_validation_of_colors():
    assert S.ff_render_fix("zz", "not-a-color") == "0 0 0 1px #not-a-colorzz"
