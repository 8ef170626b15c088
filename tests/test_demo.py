import io

from wgraph.demo import main, run_example


def test_run_example_reports_path():
    out, err = io.StringIO(), io.StringIO()
    run_example(["1", "2", "3"], [("1", "2", 4), ("2", "3", 5)], [("1", "3")], out, err)
    text = out.getvalue()
    assert text.startswith("Creating graph...\nGraph structure:\n")
    assert "Shortest path from 1 to 3:\nDistance: 9\nPath: 1 -> 2 -> 3\n\n" in text
    assert err.getvalue() == ""


def test_run_example_returns_built_graph():
    out, err = io.StringIO(), io.StringIO()
    graph = run_example(["a", "b"], [("a", "b", 2)], [], out, err)
    assert len(graph) == 2
    assert graph.shortest_path("a", "b") == (2, ["a", "b"])


def test_run_example_reports_errors_and_continues():
    out, err = io.StringIO(), io.StringIO()
    run_example(["a", "b", "c"], [("a", "b", 1)], [("a", "c"), ("a", "b")], out, err)
    assert err.getvalue() == "Error: No path exists from 'a' to 'c'\n"
    assert "Shortest path from a to b:\nDistance: 1\nPath: a -> b\n" in out.getvalue()


def test_run_example_missing_vertex_is_reported():
    out, err = io.StringIO(), io.StringIO()
    run_example(["a"], [], [("a", "q")], out, err)
    assert err.getvalue() == "Error: End vertex with label 'q' not found\n"


def test_main_prints_both_examples(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "========== Testing Graph 1 ==========" in captured.out
    assert "========== Testing Graph 2 ==========" in captured.out
    assert "Distance: 20\nPath: 1 -> 3 -> 6 -> 5\n" in captured.out
    assert "Shortest path from ENB to SUN:\nDistance: 2885\nPath: ENB -> SUN\n" in captured.out
    assert "Shortest path from LIB to CAS:" in captured.out
    assert captured.err == ""