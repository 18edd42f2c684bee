from concurrent.futures import ThreadPoolExecutor

import pytest

from kittysearch.search.engine import SearchEngine, SearchError, SearchResult


def test_simple_search():
    engine = SearchEngine(1000, True, False)
    results = engine.search_text("Hello world\nThis is a test\nHello again", "Hello")
    assert len(results) == 2
    assert results[0].line_number == 1
    assert results[1].line_number == 3


def test_case_insensitive_search():
    engine = SearchEngine(1000, False, False)
    results = engine.search_text("Hello World\nthis is a TEST\nhello again", "hello")
    assert len(results) == 2
    assert results[0].line_number == 1
    assert results[1].line_number == 3


def test_regex_search():
    engine = SearchEngine(1000, True, True)
    results = engine.search_text("Error: 404\nWarning: timeout\nError: 500", r"Error: \d+")
    assert len(results) == 2
    assert results[0].line_number == 1
    assert results[1].line_number == 3


def test_empty_pattern():
    engine = SearchEngine(1000, True, False)
    assert engine.search_text("Hello world", "") == []
    assert engine.cache_size() == 0


def test_no_matches():
    engine = SearchEngine(1000, True, False)
    assert engine.search_text("Hello world\nThis is a test", "nonexistent") == []


def test_cache_functionality():
    engine = SearchEngine(1000, True, False)
    text = "Hello world\nThis is a test"
    first = engine.search_text(text, "Hello")
    assert engine.cache_size() == 1
    second = engine.search_text(text, "Hello")
    assert engine.cache_size() == 1
    assert first == second
    engine.search_text(text, "test")
    assert engine.cache_size() == 2


def test_buffer_search():
    engine = SearchEngine(1000, True, False)
    results = engine.search_buffer(b"Hello world\nThis is a test\nHello again", "Hello")
    assert len(results) == 2
    assert results[0].line_number == 1
    assert results[1].line_number == 3


def test_match_spans_point_at_pattern():
    engine = SearchEngine(1000, True, False)
    results = engine.search_text("Hello world", "world")
    assert len(results) == 1
    result = results[0]
    assert isinstance(result, SearchResult)
    assert result.line[result.match_start:result.match_end] == "world"


def test_literal_pattern_is_escaped():
    engine = SearchEngine(1000, True, False)
    assert engine.search_text("a.b\naxb", "a.b")[0].line_number == 1
    assert len(engine.search_text("a.b\naxb", "a.b")) == 1


def test_invalid_regex_raises():
    engine = SearchEngine(1000, True, True)
    with pytest.raises(SearchError):
        engine.search_text("text", "(unclosed")


def test_large_buffer_search():
    engine = SearchEngine(10_000, False, False)
    parts = []
    for i in range(500):
        if i % 100 == 0:
            parts.append(f"ERROR: Line {i} has an error\n")
        elif i % 200 == 0:
            parts.append(f"WARN: Line {i} has a warning\n")
        else:
            parts.append(f"INFO: Line {i} normal log entry\n")
    results = engine.search_text("".join(parts), "ERROR")
    assert results
    assert len(results) >= 4


def test_very_large_buffer_search():
    engine = SearchEngine(100_000, False, False)
    parts = []
    for i in range(5000):
        if i % 100 == 0:
            parts.append(f"ERROR: Line {i} has an error\n")
        elif i % 200 == 0:
            parts.append(f"WARN: Line {i} has a warning\n")
        else:
            parts.append(f"INFO: Line {i} normal log entry\n")
    results = engine.search_text("".join(parts), "ERROR")
    assert len(results) > 40


@pytest.mark.parametrize("workers", [3, 10])
def test_concurrent_searches(workers):
    engine = SearchEngine(1000, False, False)
    text = "Hello world\nThis is a test\nHello again\nTesting concurrent access"
    patterns = ["Hello" if i % 2 == 0 else "test" for i in range(workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes = list(pool.map(lambda p: engine.search_text(text, p), patterns))
    for pattern, results in zip(patterns, outcomes):
        if pattern == "Hello":
            assert [r.line_number for r in results] == [1, 3]
        else:
            assert [r.line_number for r in results] == [2, 4]


def test_file_based_search(tmp_path):
    engine = SearchEngine(10_000, True, False)
    path = tmp_path / "log.txt"
    path.write_text(
        "Line 1: Starting application\n"
        "Line 2: Loading configuration\n"
        "Line 3: ERROR: Failed to connect to database\n"
        "Line 4: Retrying connection...\n"
        "Line 5: ERROR: Connection timeout\n"
        "Line 6: Application shutting down\n",
        encoding="utf-8",
    )
    results = engine.search_text(path.read_text(encoding="utf-8"), "ERROR")
    assert len(results) == 2
    assert results[0].line_number == 3
    assert results[1].line_number == 5


def test_regex_patterns():
    engine = SearchEngine(1000, True, True)
    text = """
2023-12-01 10:30:15 INFO Starting service
2023-12-01 10:30:16 ERROR Connection failed (code: 500)
2023-12-01 10:30:17 WARN Retrying in 5 seconds
2023-12-01 10:30:22 ERROR Timeout occurred (code: 408)
2023-12-01 10:30:23 INFO Service recovered
"""
    assert len(engine.search_text(text, r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")) == 5
    assert len(engine.search_text(text, r"code: \d+")) == 2
    assert len(engine.search_text(text, r"(ERROR|WARN|INFO)")) == 5


@pytest.mark.parametrize("lines,expected_min", [(5_000, 4), (50_000, 41)])
def test_memory_efficiency(lines, expected_min):
    engine = SearchEngine(500_000, False, False)
    parts = []
    for i in range(lines):
        parts.append(f"Line {i}: Some random content here\n")
        if i % 1000 == 0:
            parts.append(f"MARKER: Checkpoint at line {i}\n")
    results = engine.search_text("".join(parts), "MARKER")
    assert len(results) >= expected_min
    engine.clear_cache()
    assert engine.cache_size() == 0


def test_unicode_support():
    engine = SearchEngine(1000, True, False)
    text = """
Hello 世界
Tëst with açcénts
Emoji test: 🔍 🚀 ⚡
Russian: Привет мир
Arabic: مرحبا بالعالم
"""
    assert len(engine.search_text(text, "世界")) == 1
    assert len(engine.search_text(text, "açcénts")) == 1
    assert len(engine.search_text(text, "🔍")) == 1


def test_edge_cases():
    engine = SearchEngine(1000, True, False)
    assert engine.search_text("", "test") == []
    long_results = engine.search_text("a" * 10_000, "a")
    assert len(long_results) == 10_000
    special = "Line with special chars: !@#$%^&*()_+-=[]{}|;':\",./<>?"
    assert len(engine.search_text(special, "!@#")) == 1


def test_binary_text_is_not_searched():
    engine = SearchEngine(1000, True, False)
    assert engine.search_text("Hello\x00\nHello", "Hello") == []