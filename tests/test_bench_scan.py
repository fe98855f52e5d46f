import json
import bench_scan


def test_benchmark_writes_results(small_tree, tmp_path, capsys):
    out_file = tmp_path / "bench" / "results.json"

    payload = bench_scan.benchmark(small_tree, 0, workers=[1, 2], repeats=2, out_file=out_file)

    assert [r["workers"] for r in payload["results"]] == [1, 2]
    assert all(len(r["times"]) == 2 for r in payload["results"])
    assert json.loads(out_file.read_text(encoding="utf-8"))["src"] == str(small_tree)
    assert "2 workers" in capsys.readouterr().out
