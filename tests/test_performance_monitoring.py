from tfidf_ranker.performance_monitoring import Profiler


def test_timer_accumulates_repeated_tasks():
    profiler = Profiler()
    with profiler.timer("Scoring"):
        pass
    first = profiler.timings["Scoring"]
    with profiler.timer("Scoring"):
        pass
    assert profiler.timings["Scoring"] >= first
    assert list(profiler.timings) == ["Scoring"]


def test_global_time_before_and_after_start():
    profiler = Profiler()
    assert profiler.get_global_time() == 0.0
    profiler.start_global_timer()
    assert profiler.get_global_time() >= 0.0


def test_report_lists_timings_and_writes_file(tmp_path):
    profiler = Profiler()
    profiler.start_global_timer()
    with profiler.timer("Corpus Building"):
        pass
    path = tmp_path / "report.txt"
    report = profiler.generate_report(doc_count=1200, vocab_size=35, filename=str(path))
    assert "Corpus Building:" in report
    assert "Documents: 1,200  Vocabulary: 35" in report
    assert path.read_text() == report
