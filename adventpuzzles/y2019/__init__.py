"""Puzzle solutions for the 2019 calendar."""