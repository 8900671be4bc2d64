"""Puzzle solutions for the 2018 calendar."""