"""Design tokens for the web UI theme (single source of truth).

Each token maps to one value per variant, in ``Variant`` order:
(light, dark, black). Declaration order is the order in the generated file;
keep it stable so regenerated output diffs cleanly.
"""
from __future__ import annotations

from enum import IntEnum

from .shadows import (
    dark_ffrf,
    dark_p3d,
    inset,
    join_shadows as shadows,
    light_ffrf,
    light_p3d,
)


class Variant(IntEnum):
    """Theme variant, valued by its position in a token triple."""

    LIGHT = 0
    DARK = 1
    BLACK = 2


TokenTable = dict[str, tuple[str, str, str]]


THEME_VARIABLES: TokenTable = {
    "primary-color": ("#000000", "#ffffff", "#ffffff"),
    "strong-color": ("#000000", "#ffffff", "#ffffff"),
    "grey-1-color": ("#111111", "#eeeeee", "#eeeeee"),
    "grey-2-color": ("#222222", "#dddddd", "#dddddd"),
    "grey-3-color": ("#333333", "#cccccc", "#cccccc"),
    "grey-4-color": ("#444444", "#bbbbbb", "#bbbbbb"),
    "grey-5-color": ("#555555", "#aaaaaa", "#aaaaaa"),
    "grey-6-color": ("#666666", "#999999", "#999999"),
    "grey-7-color": ("#777777", "#888888", "#888888"),
    "grey-8-color": ("#888888", "#777777", "#777777"),
    "grey-9-color": ("#999999", "#666666", "#666666"),
    "grey-a-color": ("#aaaaaa", "#555555", "#555555"),
    "grey-b-color": ("#bbbbbb", "#444444", "#444444"),
    "grey-c-color": ("#cccccc", "#333333", "#333333"),
    "grey-d-color": ("#dddddd", "#222222", "#222222"),
    "grey-e-color": ("#eeeeee", "#111111", "#111111"),
    "grey-e7-color": ("#e7e7e7", "#0c0c0c", "#0c0c0c"),
    "grey-f9-color": ("#f9f9f9", "#070707", "#070707"),
    "layout-bg-color": ("#cccccc", "#222222", "#222222"),
    "secondary-bg-color": ("#f5f5f5", "#050505", "#050505"),
    "primary-bg-color": ("#ffffff", "#000000", "#000000"),

    # Contextual colors
    "error-color": ("#d00000", "#ff1111", "#ff1111"),
    "error-color-faded": ("#ff1111", "#d00000", "#d00000"),
    "link-color": ("#0066ee", "#22aaff", "#22aaff"),
    "online-green-color": ("#00c220", "#00c220", "#00c220"),

    # Danger buttons
    "danger-button-color": ("#ffffff", "#ffffff", "#ffffff"),
    "danger-button-background": (
        "linear-gradient(#ff0000, #cc0000)",
        "linear-gradient(#dd0000, #aa0000)",
        "linear-gradient(#dd0000, #aa0000)",
    ),
    "danger-button-hover-background": (
        "linear-gradient(#dd0000, #aa0000)",
        "linear-gradient(#bb0000, #880000)",
        "linear-gradient(#bb0000, #880000)",
    ),
    "danger-button-active-background": (
        "linear-gradient(#cc0000, #880000)",
        "linear-gradient(#aa0000, #660000)",
        "linear-gradient(#aa0000, #660000)",
    ),
    "danger-button-shadow": (
        shadows("0 4px 8px -3px #00000026", "0 0.4px 0 0.8px #880000ff", light_ffrf()),
        shadows("0 -0.33px 0 1px #ff555533", dark_ffrf()),
        shadows("0 -0.33px 0 1px #ff555533", dark_ffrf()),
    ),
    "danger-button-hover-shadow": (
        shadows("0 6px 8px -4px #00000033", "0 0.4px 0 0.8px #660000ff", light_ffrf()),
        shadows("0 -0.33px 0 1px #ff555555", dark_ffrf()),
        shadows("0 -0.33px 0 1px #ff555555", dark_ffrf()),
    ),
    "danger-button-active-shadow": (
        shadows("0 4px 6px -3px #00000026", "0 0.4px 0 0.8px #660000ff", light_ffrf()),
        shadows("0 -0.33px 0 1px #ff555544", dark_ffrf()),
        shadows("0 -0.33px 0 1px #ff555544", dark_ffrf()),
    ),

    # Nav
    "nav-bg-color": ("#e7e7e7", "#050505", "#050505"),
    "nav-button-active-bg-color": ("#d5d5d5", "#111111", "#111111"),
    "nav-button-active-hover-bg-color": ("#cccccc", "#1c1c1c", "#1c1c1c"),

    # Code
    "code-bg-color": ("#44444411", "#aaaaaa11", "#aaaaaa11"),
    "code-shadow": (
        shadows("0 6px 9px -4px #00000033", "0 0.4px 0 0.8px #0000001a", light_ffrf()),
        shadows("0 0.33px 0 1px #ffffff26", dark_ffrf()),
        shadows("0 0.33px 0 1px #ffffff26", dark_ffrf()),
    ),

    # Process details
    "sparkline-stroke": ("#ee0000", "#ee0000", "#ee0000"),
    "sparkline-fill": ("#ee000044", "#ee000044", "#ee000044"),

    # Spinners
    "spinner-grey": ("#777777ff", "#777777ff", "#777777ff"),
    "spinner-grey-light": ("#77777733", "#77777733", "#77777733"),

    # Checkbox
    "checkbox-color": ("#777777ff", "#999999ff", "#999999ff"),
    "checkbox-bg-color": ("#77777700", "#99999900", "#99999900"),
    "checkbox-border-color": ("#77777777", "#99999977", "#99999977"),
    "checkbox-hover-color": ("#444444", "#777777", "#777777"),
    "checkbox-hover-bg-color": ("#77777711", "#99999922", "#99999922"),
    "checkbox-focus-bg-color": ("#77777722", "#99999944", "#99999944"),
    "checkbox-active-hover-bg-color": ("#55ccff22", "#19baff22", "#19baff22"),
    "checkbox-active-focus-bg-color": ("#55ccff44", "#19baff44", "#19baff44"),
    "checkbox-active-color": ("#008ac5", "#19baff", "#19baff"),
    "checkbox-active-border-color": ("#008ac577", "#19baff77", "#19baff77"),

    # Buttons
    "icon-button-bg-color": ("#00000000", "#eeeeee00", "#eeeeee00"),
    "icon-button-hover-bg-color": ("#00000010", "#eeeeee18", "#eeeeee18"),
    "icon-button-focus-bg-color": ("#00000018", "#eeeeee33", "#eeeeee33"),
    "button-background": (
        "linear-gradient(#fff, #f5f5f5)",
        "linear-gradient(#141414, #040404)",
        "linear-gradient(#141414, #040404)",
    ),
    "button-hover-background": (
        "linear-gradient(#fafafa, #e7e7e7)",
        "linear-gradient(#242424, #111111)",
        "linear-gradient(#242424, #111111)",
    ),
    "button-active-background": (
        "linear-gradient(#f7f7f7, #e0e0e0)",
        "linear-gradient(#111111, #000000)",
        "linear-gradient(#111111, #000000)",
    ),
    "button-inset-background": (
        "linear-gradient(#00000022, #00000011)",
        "linear-gradient(#222222, #333333)",
        "linear-gradient(#222222, #333333)",
    ),
    "button-shadow": (
        shadows("0 4px 8px -3px #00000022", light_p3d("40"), light_ffrf()),
        shadows(dark_p3d("30"), dark_ffrf()),
        shadows(dark_p3d("30"), dark_ffrf()),
    ),
    "button-hover-shadow": (
        shadows("0 6px 8px -4px #00000030", light_p3d("59"), light_ffrf()),
        shadows(dark_p3d("50"), dark_ffrf()),
        shadows(dark_p3d("50"), dark_ffrf()),
    ),
    "button-active-shadow": (
        shadows("0 4px 6px -3px #00000024", light_p3d("73"), light_ffrf()),
        shadows(dark_p3d("40"), dark_ffrf()),
        shadows(dark_p3d("40"), dark_ffrf()),
    ),
    "button-inset-shadow": (
        shadows(
            inset("0 4px 8px -3px #00000022"),
            inset(light_p3d("40")),
            inset(light_ffrf()),
        ),
        shadows(inset(dark_p3d("40")), inset(dark_ffrf())),
        shadows(inset(dark_p3d("40")), inset(dark_ffrf())),
    ),

    # Shadows
    "heavy-3d-box-shadow": (
        shadows("0 8px 12px -6px #0000004d", light_p3d("30", 0.5, 0, 1), light_ffrf()),
        shadows(dark_p3d("23"), "0 8px 12px -6px #0000004d", dark_ffrf()),
        shadows(dark_p3d("23"), "0 8px 12px -6px #0000004d", dark_ffrf()),
    ),
    "text-input-shadow": (
        shadows(
            inset("0 6px 9px -4px #0000001a"),
            inset(light_p3d("1a")),
            inset(light_ffrf()),
        ),
        shadows(dark_p3d("26"), inset("0 6px 9px -4px #0000001a"), inset(dark_ffrf())),
        shadows(dark_p3d("26"), inset("0 6px 9px -4px #0000001a"), inset(dark_ffrf())),
    ),
    "text-input-shadow-focus": (
        shadows(
            "0 0px 0 1px #0066ee",
            inset("0 6px 9px -4px #0000001a"),
            inset(light_p3d("1a")),
            inset(light_ffrf()),
        ),
        shadows(
            "0 0px 0 1px #22aaff",
            inset("0 6px 9px -4px #0000001a"),
            inset(light_p3d("1a")),
            inset(dark_ffrf()),
        ),
        shadows(
            "0 0px 0 1px #22aaff",
            inset("0 6px 9px -4px #0000001a"),
            inset(light_p3d("1a")),
            inset(dark_ffrf()),
        ),
    ),
    "shadow-focus": (
        "0 0px 0 1px #0066ee",
        "0 0px 0 1px #22aaff",
        "0 0px 0 1px #22aaff",
    ),
    "dropdown-shadow": (
        shadows("0 12px 12px -4px #00000033", light_p3d("52"), light_ffrf()),
        shadows(dark_p3d("55"), "0 12px 12px -4px #00000033", dark_ffrf()),
        shadows(dark_p3d("55"), "0 12px 12px -4px #00000033", dark_ffrf()),
    ),
    "card-shadow": (
        shadows(
            "0 4px 8px -3px #00000022",
            "0.2px 0.3px 0 0.7px #00000030",
            light_ffrf(),
        ),
        shadows(
            "0.25px -0.25px 0 0.75px #ffffff30",
            "0 4px 8px -3px #00000022",
            dark_ffrf(),
        ),
        shadows(
            "0.25px -0.25px 0 0.75px #ffffff30",
            "0 4px 8px -3px #00000022",
            dark_ffrf(),
        ),
    ),
    "card-hover-shadow": (
        shadows(
            "0 6px 8px -4px #00000044",
            "0.2px 0.25px 0 0.85px #00000050",
            light_ffrf(),
        ),
        shadows(
            "0.25px -0.25px 0 1px #ffffff50",
            "0 6px 8px -4px #00000044",
            dark_ffrf(),
        ),
        shadows(
            "0.25px -0.25px 0 1px #ffffff50",
            "0 6px 8px -4px #00000044",
            dark_ffrf(),
        ),
    ),
}

# Applied to every descendant so the log palette wins over local overrides.
CHILD_VARIABLES: TokenTable = {
    "log-color": (
        "var(--light-log-color)",
        "var(--dark-log-color)",
        "var(--dark-log-color)",
    ),
    "log-bg-color": (
        "var(--light-log-bg-color)",
        "var(--dark-log-bg-color)",
        "var(--dark-log-bg-color)",
    ),
    "log-hover-color": (
        "var(--light-log-hover-color)",
        "var(--dark-log-hover-color)",
        "var(--dark-log-hover-color)",
    ),
    "log-bg-hover-color": (
        "var(--light-log-bg-hover-color)",
        "var(--dark-log-bg-hover-color)",
        "var(--dark-log-bg-hover-color)",
    ),
}
