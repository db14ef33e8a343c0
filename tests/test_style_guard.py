import re

from themegen.gui import build_theme
from themegen.gui import design_tokens as T
from themegen.gui.design_tokens import Variant

RULE_PATTERN = re.compile(r"^(body\.[a-z]+(?: \*)?) \{\n(.*?)^\}", re.M | re.S)

# Emission order of rules in the generated file, with the variant each uses
EXPECTED_RULES = [
    ("body.auto", Variant.LIGHT),
    ("body.auto *", Variant.LIGHT),
    ("body.auto", Variant.BLACK),
    ("body.auto *", Variant.BLACK),
    ("body.light", Variant.LIGHT),
    ("body.light *", Variant.LIGHT),
    ("body.dark", Variant.DARK),
    ("body.dark *", Variant.DARK),
    ("body.black", Variant.BLACK),
    ("body.black *", Variant.BLACK),
]


def _declarations(body):
    decls = {}
    for line in body.splitlines():
        name, _, value = line.strip().partition(": ")
        assert name.startswith("--") and value.endswith(";"), line
        assert name[2:] not in decls, f"Duplicate declaration {name}"
        decls[name[2:]] = value[:-1]
    return decls


def test_build_generates_css(tmp_path):
    out = build_theme.build(tmp_path / "theme-generated.css")
    assert out.exists(), "theme-generated.css was not generated"

    css = out.read_text(encoding="utf-8")
    assert css.startswith("/* Generated file. DO NOT EDIT. */\n")
    assert css.endswith("}\n") and not css.endswith("\n\n")

    # Required selectors exist
    for sel in ("body.auto {", "body.light {", "body.dark {", "body.black {",
                "body.auto * {", "@media (prefers-color-scheme: dark) {"):
        assert sel in css, f"Missing selector {sel}"


def test_every_rule_carries_its_variant_values():
    css = build_theme.render_document()
    rules = RULE_PATTERN.findall(css)
    assert [sel for sel, _ in rules] == [sel for sel, _ in EXPECTED_RULES]

    for (selector, body), (_, variant) in zip(rules, EXPECTED_RULES):
        table = T.CHILD_VARIABLES if selector.endswith("*") else T.THEME_VARIABLES
        expected = {name: values[variant] for name, values in table.items()}
        assert _declarations(body) == expected, selector


def test_auto_mirrors_light_and_black():
    rules = RULE_PATTERN.findall(build_theme.render_document())
    by_position = [body for _, body in rules]
    assert by_position[0] == by_position[4]  # auto == light
    assert by_position[1] == by_position[5]
    assert by_position[2] == by_position[8]  # auto dark-preference == black
    assert by_position[3] == by_position[9]


def test_child_tokens_only_under_descendant_selector():
    css = build_theme.render_document()
    for selector, body in RULE_PATTERN.findall(css):
        names = set(_declarations(body))
        if selector.endswith("*"):
            assert names == set(T.CHILD_VARIABLES)
        else:
            assert not names & set(T.CHILD_VARIABLES)


def test_media_query_wraps_auto_dark_block():
    css = build_theme.render_document()
    start = css.index("@media (prefers-color-scheme: dark) {\n")
    end = css.index("body.light {")
    media = css[start:end]
    assert media.count("body.auto {") == 1
    assert media.count("body.auto * {") == 1
    assert media.endswith(";\n}}\n")
    assert f"--primary-color: {T.THEME_VARIABLES['primary-color'][Variant.BLACK]};" in media


def test_rendering_is_deterministic(tmp_path):
    first = build_theme.build(tmp_path / "a.css").read_bytes()
    second = build_theme.build(tmp_path / "b.css").read_bytes()
    assert first == second


def test_token_triples_have_three_values():
    for table in (T.THEME_VARIABLES, T.CHILD_VARIABLES):
        for name, values in table.items():
            assert len(values) == len(Variant), name
            assert all(isinstance(v, str) and v for v in values), name
