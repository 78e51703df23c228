"""Unit tests — template hydration (pure functions)."""

from nodiff.core.application.skills.respond.message_templates import (
    build_failure_message,
    hydrate_template,
)


class TestHydrateTemplate:
    def test_string_without_placeholders_is_untouched(self) -> None:
        template = "Look mum, no template variables!"
        assert hydrate_template(template, {"answer": 42}) == template

    def test_no_variables_leaves_placeholders(self) -> None:
        template = "A wild %{pokemon} appears! Who's that %{pokemon}?"
        assert hydrate_template(template, {}) == template
        assert hydrate_template(template) == template

    def test_unmatched_variables_leave_placeholders(self) -> None:
        template = "A wild %{pokemon} appears! Who's that %{pokemon}?"
        assert hydrate_template(template, {"digimon": "digital monster"}) == template

    def test_replaces_every_occurrence(self) -> None:
        template = "A wild %{pokemon} appears! Who's that %{pokemon}?"
        variables = {"digimon": "digital monster", "pokemon": "Pikachu"}

        hydrated = hydrate_template(template, variables)

        assert hydrated == "A wild Pikachu appears! Who's that Pikachu?"
        assert "%{pokemon}" not in hydrated

    def test_mixed_known_and_unknown(self) -> None:
        template = "Today is %{today}, after %{today} comes %{tomorrow}."

        hydrated = hydrate_template(template, {"today": "Tuesday"})

        assert hydrated == "Today is Tuesday, after Tuesday comes %{tomorrow}."

    def test_identifier_charset(self) -> None:
        assert hydrate_template("%{a_B9}", {"a_B9": "ok"}) == "ok"
        assert hydrate_template("%{a-b}", {"a-b": "nope"}) == "%{a-b}"

    def test_values_are_not_rehydrated(self) -> None:
        assert hydrate_template("%{a}", {"a": "%{b}", "b": "x"}) == "%{b}"

    def test_non_string_values(self) -> None:
        assert hydrate_template("answer=%{answer}", {"answer": 42}) == "answer=42"


class TestFailureMessage:
    def test_lists_files_as_markdown(self) -> None:
        message = build_failure_message({"filesAsMarkdownList": "- a.js\n- b.js"})
        assert message == "You made meaningless changes to:\n- a.js\n- b.js"
