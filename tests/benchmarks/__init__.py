"""Query-engine benchmarks — uses pytest-benchmark (``pip install "mp-query[test]"``).

Not collected by default (``testpaths`` points at ``tests/unit``). Run with::

    pytest tests/benchmarks/ -v --benchmark-sort=median
    pytest tests/benchmarks/ --benchmark-disable   # as plain functional tests
"""
