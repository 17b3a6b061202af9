"""Tests for the style compiler.

Covers: rule sets, nesting, grouping at-rules, keyframes, font faces,
inline and registered animations, variables and functions.
"""

from __future__ import annotations

import logging

import pytest

from stylemap.animation import AnimationDefinition, anonymous_animation
from stylemap.compiler import compile_rules, css, font_face_css, keyframes_css
from stylemap.context import StyleContext

# =============================================================================
# Basics
# =============================================================================


class TestBasicRules:
    def test_empty_rule_emits_nothing(self):
        assert css({".test": {}}) == ""
        assert compile_rules({".test": {}}) == []

    def test_none_values_dropped(self):
        assert css({".test": {"width": None}}) == ""

    def test_basic_properties(self):
        assert css({".test": {"background": "blue"}}) == ".test { background: blue; }"
        assert css({".test": {"width": 5}}) == ".test { width: 5px; }"
        assert css({".test": {"marginLeft": 3}}) == ".test { margin-left: 3px; }"
        assert css({".test": {"overflowX": "auto"}}) == ".test { overflow-x: auto; }"

    def test_vendor_prefixes(self):
        assert (
            css({".test": {"WebkitAlignSelf": "start"}})
            == ".test { -webkit-align-self: start; }"
        )
        assert css({".test": {"MozBoxAlign": "start"}}) == ".test { -moz-box-align: start; }"
        assert (
            css({".test": {"msContentZooming": "zoom"}})
            == ".test { -ms-content-zooming: zoom; }"
        )

    def test_multiple_properties(self):
        assert (
            css({".test": {"background": "blue", "width": 5}})
            == ".test { background: blue; width: 5px; }"
        )

    def test_multiple_values(self):
        assert (
            css({".test": {"transitionProperty": ["width", "height"]}})
            == ".test { transition-property: width, height; }"
        )
        assert css({".test": {"margin": [1, "2em"]}}) == ".test { margin: 1px 2em; }"
        assert (
            css({".test": {"gridTemplate": ["max-content", [1, 2]]}})
            == ".test { grid-template: max-content / 1px 2px; }"
        )

    def test_top_level_at_rule_is_not_wrapped(self):
        assert css({"@page": {"margin": "1cm"}}) == "@page { margin: 1cm; }"


# =============================================================================
# Rule set shapes
# =============================================================================


class TestRuleSets:
    def test_pairs(self):
        assert css([(".test", {"background": "blue"})]) == ".test { background: blue; }"

    def test_selector_lists_expand_in_order(self):
        assert css([([".foo", ".bar"], {"width": 1})]) == (
            ".foo { width: 1px; }\n.bar { width: 1px; }"
        )

    def test_compile_rules_returns_list(self):
        assert compile_rules({".a": {"width": 5, "$": {"input": {"width": 1}}}}) == [
            ".a { width: 5px; }",
            ".a input { width: 1px; }",
        ]


# =============================================================================
# Nesting
# =============================================================================


class TestNesting:
    def test_pseudo_key(self):
        assert css({".test": {"::before": {"width": 1}}}) == ".test::before { width: 1px; }"

    def test_nested_pseudo_without_ampersand_is_descendant(self):
        assert css({".test": {"$": {"::before": {"width": 1}}}}) == ".test ::before { width: 1px; }"

    def test_ampersand_substitution(self):
        assert css({".test": {"$": {"&::before": {"width": 1}}}}) == ".test::before { width: 1px; }"
        assert css({".test": {"$": {"input&": {"width": 1}}}}) == "input.test { width: 1px; }"

    def test_descendant(self):
        assert css({".test": {"$": {"input": {"width": 1}}}}) == ".test input { width: 1px; }"
        assert css({".test": {"$": [("input", {"width": 1})]}}) == ".test input { width: 1px; }"

    def test_nested_selector_lists(self):
        assert css({".test": {"$": [(["input", "button"], {"width": 1})]}}) == (
            ".test input { width: 1px; }\n.test button { width: 1px; }"
        )

        assert css([([".foo", ".bar"], {"$": [([".baz", ".qux"], {"width": 1})]})]) == (
            ".foo .baz { width: 1px; }\n"
            ".foo .qux { width: 1px; }\n"
            ".bar .baz { width: 1px; }\n"
            ".bar .qux { width: 1px; }"
        )

    def test_own_declarations_come_first(self):
        result = css(
            {
                ".test": {
                    ":checked": {"background": "red"},
                    "$": {"input": {"background": "green"}},
                    "background": "blue",
                }
            }
        )
        assert result.split("\n") == [
            ".test { background: blue; }",
            ".test:checked { background: red; }",
            ".test input { background: green; }",
        ]


# =============================================================================
# Grouping at-rules
# =============================================================================


class TestGroupingRules:
    def test_each_inner_rule_wrapped(self):
        result = css(
            {
                ".test": {
                    "$": {
                        "@media screen": {
                            "width": 1,
                            "::before": {"width": 2},
                            "$": {"input": {"width": 3}},
                        }
                    }
                }
            }
        )
        assert result.split("\n") == [
            "@media screen { .test { width: 1px; } }",
            "@media screen { .test::before { width: 2px; } }",
            "@media screen { .test input { width: 3px; } }",
        ]

    def test_nested_grouping_rules(self):
        result = css(
            {
                ".test": {
                    "$": {
                        "@media screen": {
                            "$": {"@supports (display: grid)": {"display": "grid"}},
                        }
                    }
                }
            }
        )
        assert result == "@media screen { @supports (display: grid) { .test { display: grid; } } }"

    def test_container_queries(self):
        assert (
            css({".card": {"$": {"@container (min-width: 400px)": {"padding": 8}}}})
            == "@container (min-width: 400px) { .card { padding: 8px; } }"
        )


# =============================================================================
# Font faces and keyframes
# =============================================================================


class TestFontFace:
    def test_simple(self):
        assert (
            font_face_css({"fontFamily": "test", "src": "local(font)"})
            == "@font-face { font-family: test; src: local(font); }"
        )

    def test_src_functions(self):
        result = font_face_css(
            {
                "fontFamily": "test",
                "src": [{"url": "foo"}, {"url": "bar", "format": "woff"}, {"local": "baz"}],
            }
        )
        assert result == (
            "@font-face { font-family: test; src: url(foo), url(bar) format(woff), local(baz); }"
        )


class TestKeyframes:
    def test_offsets(self):
        result = keyframes_css(
            "test",
            {
                "from": {"width": 1},
                "50%": {"width": 2},
                70: {"width": 3},
                "80": {"width": 4},
                "to": {"width": 5},
            },
        )
        assert result.split("\n") == [
            "@keyframes test {",
            "  from { width: 1px; }",
            "  50% { width: 2px; }",
            "  70% { width: 3px; }",
            "  80% { width: 4px; }",
            "  to { width: 5px; }",
            "}",
        ]

    def test_nested_constructs_dropped_with_warning(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING, logger="stylemap.compiler"):
            result = keyframes_css(
                "pulse",
                {"to": {"opacity": 1, ":hover": {"opacity": 0}, "$": {"a": {"width": 1}}}},
            )

        assert result == "@keyframes pulse {\n  to { opacity: 1; }\n}"
        assert sum("inside keyframes pulse" in r.message for r in caplog.records) == 2


# =============================================================================
# Animations
# =============================================================================


class TestAnimations:
    def test_anonymous_animation_is_hoisted(self):
        result = css(
            {
                ".test": {
                    "animation": anonymous_animation(
                        {"from": {"background": "red"}, "to": {"background": "blue"}}, 100
                    )
                }
            }
        )
        assert result == (
            ".test { animation: test-animation-0 100ms ease 0ms 1 normal none running; }\n"
            "@keyframes test-animation-0 {\n"
            "  from { background: red; }\n"
            "  to { background: blue; }\n"
            "}"
        )

    def test_registered_animation_is_not_hoisted(self, styles: StyleContext):
        animation = styles.named_animation(
            "named-animation", {"from": {"background": "red"}, "to": {"background": "blue"}}, 100
        )
        assert css({".test": {"animation": animation}}) == (
            ".test { animation: named-animation-0 100ms ease 0ms 1 normal none running; }"
        )

    def test_unregistered_named_animation(self):
        animation = AnimationDefinition(
            name="named-animation",
            keyframes={"from": {"background": "red"}, "to": {"background": "blue"}},
            duration=100,
        )
        assert css({".test": {"animation": animation}}) == (
            ".test { animation: named-animation-0 100ms ease 0ms 1 normal none running; }\n"
            "@keyframes named-animation-0 {\n"
            "  from { background: red; }\n"
            "  to { background: blue; }\n"
            "}"
        )

    def test_unregistered_named_animation_as_mapping(self):
        animation = {
            "animationName": "named-animation",
            "animationDuration": 100,
            "keyframes": {"from": {"background": "red"}, "to": {"background": "blue"}},
        }
        assert css({".test": {"animation": animation}}) == (
            ".test { animation: named-animation-0 100ms ease 0ms 1 normal none running; }\n"
            "@keyframes named-animation-0 {\n"
            "  from { background: red; }\n"
            "  to { background: blue; }\n"
            "}"
        )

    def test_plain_mapping_definition(self):
        result = css(
            {".test": {"animation": {"name": "spin", "keyframes": {"to": {"opacity": 0}}}}}
        )
        assert result.split("\n")[0] == (
            ".test { animation: spin-0 0ms ease 0ms 1 normal none running; }"
        )

    def test_multiple_animations(self, styles: StyleContext):
        result = css(
            {
                ".test": {
                    "animation": [
                        anonymous_animation({"to": {"width": 1}}),
                        anonymous_animation(
                            {"to": {"width": 2}},
                            2,
                            "ease-out",
                            3,
                            4,
                            "reverse",
                            "forwards",
                            "paused",
                        ),
                        styles.named_animation("pre-registered", {"to": {"width": 3}}),
                        "custom 123s",
                    ]
                }
            }
        )
        assert result == (
            ".test { animation: "
            "test-animation-0 0ms ease 0ms 1 normal none running, "
            "test-animation-1 2ms ease-out 3ms 4 reverse forwards paused, "
            "pre-registered-0 0ms ease 0ms 1 normal none running, "
            "custom 123s; }\n"
            "@keyframes test-animation-0 {\n"
            "  to { width: 1px; }\n"
            "}\n"
            "@keyframes test-animation-1 {\n"
            "  to { width: 2px; }\n"
            "}"
        )

    def test_string_animation_passes_through(self):
        assert css({".a": {"animation": "spin 1s linear"}}) == ".a { animation: spin 1s linear; }"

    def test_keyframes_follow_nested_rules(self):
        result = css(
            {
                ".a": {
                    "animation": anonymous_animation({"to": {"opacity": 0}}),
                    ":hover": {"opacity": 1},
                }
            }
        )
        lines = result.split("\n")
        assert lines[0].startswith(".a { animation: a-animation-0 ")
        assert lines[1] == ".a:hover { opacity: 1; }"
        assert lines[2] == "@keyframes a-animation-0 {"

    def test_name_derived_from_effective_selector(self):
        result = css({".a": {":hover": {"animation": anonymous_animation({"to": {"opacity": 0}})}}})
        assert "@keyframes a_hover-animation-0 {" in result


# =============================================================================
# Variables and functions
# =============================================================================


class TestVariablesInRules:
    def test_set_and_fallback(self, styles: StyleContext):
        time_var = styles.variable("transitionDelay", "test")

        assert css({".test": {**time_var.set(1)}}) == ".test { --test-0: 1ms; }"
        assert (
            css({".test": {"animationDelay": time_var.or_(1)}})
            == ".test { animation-delay: var(--test-0, 1ms); }"
        )


class TestFunctionsInRules:
    def test_functions(self):
        assert (
            css({".test": {"background": {"linearGradient": ["blue", "red"]}}})
            == ".test { background: linear-gradient(blue, red); }"
        )
        assert css({".test": {"transform": {"scaleX": 2}}}) == ".test { transform: scaleX(2); }"
        assert (
            css({".test": {"transform": {"rotate3d": [1, 2, 3, 4], "skew": 5}}})
            == ".test { transform: rotate3d(1, 2, 3, 4deg) skew(5deg); }"
        )
        assert (
            css({".test": {"gridTemplateRows": {"repeat": [1, [2, {"minmax": [3, 4]}]]}}})
            == ".test { grid-template-rows: repeat(1, 2px minmax(3px, 4px)); }"
        )
