"""
vocaplan - Vocabulary lesson planner.

Teachers assemble word lists; vocaplan spreads them over a multi-day plan of
new and review words and keeps that plan consistent while it is edited.
Students then work through each day's vocabulary, phonics and spelling
activities with progress kept on-device.
"""

__version__ = "0.1.0"
