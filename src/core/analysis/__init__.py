"""Text analysis: sentence segmentation, classification and word counts."""

from .text_analyzer import analyze, classify_sentence, count_words, split_sentences

__all__ = ["analyze", "classify_sentence", "count_words", "split_sentences"]
