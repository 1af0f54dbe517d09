"""Fuzz-marked property tests. Run with: pytest -m fuzz"""
