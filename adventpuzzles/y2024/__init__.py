"""Puzzle solutions for the 2024 calendar."""