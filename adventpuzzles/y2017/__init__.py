"""Puzzle solutions for the 2017 calendar."""