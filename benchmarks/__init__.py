"""
Benchmark suite for basicjson parsing performance.

Compares basicjson against full JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different document shapes.
"""
