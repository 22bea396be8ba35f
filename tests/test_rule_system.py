import pytest

from haversack import RuleConfig, RuleSummary, RuleSyntaxError, RuleSystem, UnknownColorError


def test_summarize_sample(sample_lines):
    system = RuleSystem().load_lines(sample_lines)
    summary = system.summarize()
    print("summary:", summary)
    assert summary == RuleSummary(
        color="shiny gold",
        potential_container_count=4,
        required_bag_count=32,
    )


def test_target_color_from_config(chain_lines):
    system = RuleSystem(RuleConfig(target_color="dark green")).load_lines(chain_lines)
    assert system.required_bag_count() == 6
    assert system.potential_containers() == {
        "dark yellow",
        "dark orange",
        "dark red",
        "shiny gold",
    }
    assert system.required_bag_count("shiny gold") == 126


def test_load_file(tmp_path, sample_lines):
    rule_path = tmp_path / "input.txt"
    rule_path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    system = RuleSystem(RuleConfig(input_path=str(rule_path))).load_file()
    assert len(system.bags) == 9
    assert system.summarize().required_bag_count == 32


def test_queries_before_loading_fail():
    system = RuleSystem()
    with pytest.raises(RuntimeError):
        system.summarize()


def test_syntax_error_leaves_system_unloaded(sample_lines):
    system = RuleSystem()
    with pytest.raises(RuleSyntaxError):
        system.load_lines([*sample_lines, "broken line with no contain clause"])
    with pytest.raises(RuntimeError):
        system.graph


def test_summarize_propagates_query_errors(sample_lines):
    system = RuleSystem().load_lines(sample_lines[:5])
    with pytest.raises(UnknownColorError):
        system.summarize()


def test_load_lines_from_file_handle(tmp_path, sample_lines):
    rule_path = tmp_path / "input.txt"
    rule_path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    with rule_path.open(encoding="utf-8") as handle:
        system = RuleSystem().load_lines(handle)
    summary = system.summarize()
    print("summary:", summary)
    assert summary.potential_container_count == 4
    assert summary.required_bag_count == 32


def test_empty_color_is_not_replaced_by_default(sample_lines):
    system = RuleSystem().load_lines(sample_lines)
    assert system.potential_containers("") == set()
    with pytest.raises(UnknownColorError) as excinfo:
        system.summarize("")
    assert excinfo.value.color == ""
