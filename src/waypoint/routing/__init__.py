"""Routing — segment classification, ranking and best-match selection.

Routes are plain values. Ranking and matching are recomputed on every
pick, so route lists may change freely between calls.
"""
