"""
Benchmark suite for jtree parsing performance.

Compares jtree.parse against:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and peak memory across document shapes.
"""
