"""
Testes do codec da gramática `SOURCE -> DEST (LABEL);`.

Cobre: split de statements, comentários, erros de regra, serialização,
round-trip, GraphViz e tabela de transições.
"""

import pytest

from fsm_engine import Definition, InvalidRuleError, format_transition_table, transition_table
from fsm_engine.grammar import parse_statement, split_statements, strip_comments

COMMENTED = (
    "# Coin machine\n"
    "locked -> locked (push);"
    "locked -> unlocked (coin); # trailing comment\n"
    "\n"
    "unlocked -> locked (push);\n"
    "unlocked -> unlocked (coin);"
)


class TestStatementSplitting:
    """strip_comments, split_statements e parse_statement."""

    def test_comment_lines_and_trailing_comments_are_removed(self) -> None:
        text = "  # header\na -> b (go); # to b\n# footer"
        assert strip_comments(text) == "a -> b (go); "

    def test_statements_can_span_lines_and_last_terminator_is_optional(self) -> None:
        text = "a\n  -> b\n (go);\n\n;  c -> d (stop)"
        assert split_statements(text) == ["a -> b (go)", "c -> d (stop)"]

    def test_blank_input_has_no_statements(self) -> None:
        assert split_statements("") == []
        assert split_statements(" ;\n ; # nothing\n") == []

    def test_parse_statement_preserves_case_and_accepts_identifier_charset(self) -> None:
        assert parse_statement("Wait_For.PIN-2 -> Checking (Input_Pin)") == (
            "Wait_For.PIN-2",
            "Checking",
            "Input_Pin",
        )
        assert parse_statement("a->b(c)") == ("a", "b", "c")

    @pytest.mark.parametrize(
        "statement",
        [
            "locked -> unlocked coin",
            "locked unlocked (coin)",
            "locked -> unlocked (coin) extra",
            "a -> b (c) d -> e (f)",
            "lock ed -> unlocked (coin)",
            "locked -> unlocked ()",
            "Key -> safe (in)",
            "key -> ſafe (in)",
            "key -> safe (ın)",
            "chave -> saída (in)",
        ],
    )
    def test_parse_statement_rejects_malformed_rules(self, statement: str) -> None:
        assert parse_statement(statement) is None


class TestProcessDefinitionFormats:
    """Definition.process_definition_formats."""

    def test_turnstile_inline(self, turnstile_text: str) -> None:
        definition = Definition()

        applied = definition.process_definition_formats(turnstile_text)

        assert applied == 4
        assert set(definition.states) == {"locked", "unlocked"}
        assert definition.initial_state is definition.states["locked"]
        locked = definition.states["locked"]
        assert locked.transitions["push"].next_state is locked
        assert locked.transitions["coin"].next_state is definition.states["unlocked"]
        assert locked.transitions["coin"].state is locked

    def test_commented_multiline_text_equals_inline(self, turnstile_text: str) -> None:
        inline = Definition()
        inline.process_definition_formats(turnstile_text)
        commented = Definition()

        applied = commented.process_definition_formats(COMMENTED)

        assert applied == 4
        assert inline == commented

    def test_successive_calls_accumulate(self) -> None:
        definition = Definition()
        for rule in (
            "locked -> locked (push)",
            "locked -> unlocked (coin)",
            "unlocked -> locked (push)",
            "unlocked -> unlocked (coin)",
        ):
            definition.process_definition_formats(rule)

        assert len(definition.states) == 2
        assert sum(len(s.transitions) for s in definition.states.values()) == 4

    def test_initial_state_is_first_label_encountered(self) -> None:
        definition = Definition()
        definition.process_definition_formats("b -> a (back); a -> c (go)")
        assert definition.initial_state.label == "b"

    def test_destination_resolved_after_source(self) -> None:
        definition = Definition()
        definition.process_definition_formats("x -> y (go)")
        assert list(definition.states) == ["x", "y"]

    def test_duplicate_rule_overwrites_transition(self) -> None:
        definition = Definition()
        definition.process_definition_formats("a -> b (go); a -> c (go)")

        assert definition.states["a"].transitions["go"].next_state.label == "c"
        assert "b" in definition.states

    def test_malformed_rule_applies_nothing(self) -> None:
        definition = Definition()

        with pytest.raises(InvalidRuleError) as exc_info:
            definition.process_definition_formats("locked -> unlocked coin")

        assert exc_info.value.applied == 0
        assert exc_info.value.statement == "locked -> unlocked coin"
        assert definition.states == {}
        assert definition.initial_state is None

    def test_identifiers_are_ascii_only(self) -> None:
        definition = Definition()

        with pytest.raises(InvalidRuleError) as exc_info:
            definition.process_definition_formats("Key -> ſafe (ın)")

        assert exc_info.value.applied == 0
        assert definition.states == {}

    def test_failure_keeps_previously_applied_statements(self) -> None:
        definition = Definition()

        with pytest.raises(InvalidRuleError) as exc_info:
            definition.process_definition_formats(
                "a -> b (go);\nb -> c (go);\nbroken rule;\nc -> a (go);"
            )

        assert exc_info.value.applied == 2
        assert set(definition.states) == {"a", "b", "c"}
        assert definition.states["c"].transitions == {}

    def test_empty_text_applies_zero(self) -> None:
        definition = Definition()
        assert definition.process_definition_formats("# only a comment\n") == 0
        assert definition.states == {}


class TestDefinitionFormats:
    """Serialização e round-trip."""

    def test_output_is_sorted_and_terminated(self, turnstile_text: str) -> None:
        definition = Definition()
        definition.process_definition_formats(turnstile_text)

        assert definition.definition_formats() == (
            "locked -> locked (push);\n"
            "locked -> unlocked (coin);\n"
            "unlocked -> locked (push);\n"
            "unlocked -> unlocked (coin);"
        )

    def test_output_independent_of_insertion_order(self) -> None:
        forward = Definition()
        forward.process_definition_formats("a -> b (x); b -> a (y)")
        backward = Definition()
        backward.process_definition_formats("b -> a (y); a -> b (x)")

        assert forward.definition_formats() == backward.definition_formats()

    def test_round_trip_yields_equal_definition(self) -> None:
        original = Definition()
        original.process_definition_formats(COMMENTED + "\nlocked -> jammed (kick);")

        copy = Definition()
        copy.process_definition_formats(original.definition_formats())

        assert copy == original
        assert copy.definition_formats() == original.definition_formats()

    def test_round_trip_takes_initial_state_from_first_sorted_line(self) -> None:
        original = Definition()
        original.process_definition_formats("b -> a (y); a -> b (x)")

        copy = Definition()
        copy.process_definition_formats(original.definition_formats())

        assert original.initial_state.label == "b"
        assert copy.initial_state.label == "a"
        assert copy != original
        assert copy.definition_formats() == original.definition_formats()

    def test_round_trip_drops_isolated_states(self, turnstile_text: str) -> None:
        original = Definition()
        original.process_definition_formats(turnstile_text)
        original.state_for_label("jammed")

        copy = Definition()
        copy.process_definition_formats(original.definition_formats())

        assert "jammed" not in copy.states
        assert copy != original

    def test_empty_definition_formats_to_empty_string(self) -> None:
        assert Definition().definition_formats() == ""


class TestGraphViz:
    """Exportação DOT."""

    def test_turnstile_graph(self, turnstile_text: str) -> None:
        definition = Definition()
        definition.process_definition_formats(turnstile_text)

        dot = definition.graph_viz()

        assert dot.startswith("digraph {\n")
        assert dot.endswith("}\n")
        assert "\tstart [label=\"\", shape=circle, style=filled" in dot
        assert '\tstart -> "locked"\n' in dot
        assert '\t"locked" [label="locked"]\n' in dot
        assert '\t"unlocked" [label="unlocked"]\n' in dot
        assert '\t"locked" -> "unlocked" [label="coin"]\n' in dot
        assert '\t"unlocked" -> "unlocked" [label="coin"]\n' in dot
        assert dot.count(" -> ") == 5

    def test_empty_definition_has_start_node_without_edge(self) -> None:
        dot = Definition().graph_viz()
        assert "start [" in dot
        assert "->" not in dot

    def test_labels_with_punctuation_are_quoted(self) -> None:
        definition = Definition()
        definition.process_definition_formats("wait.pin -> check-balance (input_pin)")

        dot = definition.graph_viz()

        assert '"wait.pin" -> "check-balance" [label="input_pin"]' in dot


class TestTransitionTable:
    """transition_table e format_transition_table."""

    def test_table_cells(self) -> None:
        definition = Definition()
        definition.process_definition_formats(
            "locked -> locked (push); locked -> unlocked (coin); unlocked -> locked (push)"
        )

        table = transition_table(definition)

        assert table.state_labels == ("locked", "unlocked")
        assert table.transition_labels == ("coin", "push")
        assert table.destination("coin", "locked") == "unlocked"
        assert table.destination("coin", "unlocked") is None
        assert table.destination("missing", "locked") is None

    def test_formatted_table(self) -> None:
        definition = Definition()
        definition.process_definition_formats(
            "locked -> locked (push); locked -> unlocked (coin); unlocked -> locked (push)"
        )

        assert format_transition_table(definition) == (
            "locked | unlocked\n"
            "coin: unlocked | ...\n"
            "push: locked | locked"
        )
