"""Tokenize a small document and print every event."""

from tagscan import tokenize

for event in tokenize('<?xml version="1.0"?><greeting lang="en" loud="true">Hello</greeting>'):
    print(event)
