import io

from fwcs_sz6 import settings
from fwcs_sz6 import Textual_FWCS_Solver as textual


EXPECTED_TRACE = """\
Processing Level 0 {L:WSCF R:}
Adding state {L:WC R:FS}
Processing Level 1 {L:WC R:FS}
Adding state {L:WCF R:S}
Processing Level 2 {L:WCF R:S}
Adding state {L:C R:SFW}
Adding state {L:W R:SFC}
Processing Level 3 {L:C R:SFW}
Adding state {L:CFS R:W}
Processing Level 3 {L:W R:SFC}
Adding state {L:WFS R:C}
Processing Level 4 {L:CFS R:W}
Adding state {L:S R:WFC}
Processing Level 4 {L:WFS R:C}
Adding state {L:S R:CFW}
Processing Level 5 {L:S R:WFC}
Adding state {L:SF R:WC}
Adding state {L:SFW R:C}
Processing Level 5 {L:S R:CFW}
Adding state {L:SF R:CW}
Adding state {L:SFC R:W}
Processing Level 6 {L:SF R:WC}
Found solution {L: R:WCFS}
Processing Level 6 {L:SFW R:C}
Adding state {L:W R:CFS}
Processing Level 6 {L:SF R:CW}
Found solution {L: R:CWFS}
Processing Level 6 {L:SFC R:W}
Adding state {L:C R:WFS}
Processing Level 7 {L:W R:CFS}
Processing Level 7 {L:C R:WFS}""".splitlines()

EXPECTED_GRAPH = """\
Level 0 {L:WSCF R:}
Level 1 {L:WC R:FS}
Level 2 {L:WCF R:S}
Level 3 {L:C R:SFW}
Level 3 {L:W R:SFC}
Level 4 {L:CFS R:W}
Level 4 {L:WFS R:C}
Level 5 {L:S R:WFC}
Level 5 {L:S R:CFW}
Level 6 {L:SF R:WC}
Level 6 {L:SFW R:C}
Level 6 {L:SF R:CW}
Level 6 {L:SFC R:W}
Level 7 {L: R:WCFS}
Level 7 {L:W R:CFS}
Level 7 {L: R:CWFS}
Level 7 {L:C R:WFS}""".splitlines()

SOLUTION_1 = (
    "{L:WSCF R:}--FS moves right->>{L:WC R:FS}--F moves left->>"
    "{L:WCF R:S}--FW moves right->>{L:C R:SFW}--FS moves left->>"
    "{L:CFS R:W}--FC moves right->>{L:S R:WFC}--F moves left->>"
    "{L:SF R:WC}--FS moves right->>{L: R:WCFS}"
)
SOLUTION_2 = (
    "{L:WSCF R:}--FS moves right->>{L:WC R:FS}--F moves left->>"
    "{L:WCF R:S}--FC moves right->>{L:W R:SFC}--FS moves left->>"
    "{L:WFS R:C}--FW moves right->>{L:S R:CFW}--F moves left->>"
    "{L:SF R:CW}--FS moves right->>{L: R:CWFS}"
)


def test_search_trace_lines(result):
    assert textual.search_trace_lines(result) == EXPECTED_TRACE


def test_graph_lines(result):
    assert textual.graph_lines(result) == EXPECTED_GRAPH


def test_solution_lines(result):
    assert textual.solution_lines(result) == [
        "No. of solutions:  2",
        "Solution 1",
        "No. of moves: 7",
        SOLUTION_1,
        "Solution 2",
        "No. of moves: 7",
        SOLUTION_2,
    ]


def test_format_path_of_root_only(result):
    assert textual.format_path([result.root]) == "{L:WSCF R:}"


def test_report_layout(result):
    lines = textual.report_lines(result)
    assert lines[:3] == [
        "Solving Wolf, Sheep, Cabbage, Farmer, River Crossing Puzzle",
        "",
        "Creating State Graph using Breadth First Search",
    ]
    graph_start = 3 + len(EXPECTED_TRACE)
    assert lines[3:graph_start] == EXPECTED_TRACE
    assert lines[graph_start:graph_start + 3] == [
        "", "", "State Graph in Breadth first order"]
    tail = lines[graph_start + 3 + len(EXPECTED_GRAPH):]
    assert tail[:4] == ["", "", "", "Solutions to the River Crossing Puzzle"]


def test_report_without_trace(result):
    lines = textual.report_lines(result, show_trace=False)
    assert not any(line.startswith("Processing Level") for line in lines)
    assert "State Graph in Breadth first order" in lines


def test_main_prints_report(monkeypatch):
    monkeypatch.setattr(settings, 'SVG_DIR', '')
    monkeypatch.setattr(settings, 'SHOW_SEARCH_TRACE', True)
    out = io.StringIO()
    assert textual.main(out=out) == 0
    printed = out.getvalue().splitlines()
    assert printed[0] == textual.TITLE
    assert printed[-1] == SOLUTION_2
    assert printed.count("No. of moves: 7") == 2


def test_main_writes_svgs(monkeypatch, tmp_path):
    target = tmp_path / "pictures"
    monkeypatch.setattr(settings, 'SVG_DIR', str(target))
    assert textual.main(out=io.StringIO()) == 0
    assert sorted(p.name for p in target.iterdir()) == [
        "solution_1.svg", "solution_2.svg"]
