"""Tokenize a code block with a two-line header."""

from markscan import tokenize

source = "title: Greeting\nlang: python\nprint('hello')\nprint('world')"

for token in tokenize(source):
    print(token)
