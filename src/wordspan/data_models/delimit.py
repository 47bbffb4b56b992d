from enum import Enum


class WordDelimiting(str, Enum):
    entire_words = "entire_words"
    camel_case = "camel_case"  # also split before uppercase letters
