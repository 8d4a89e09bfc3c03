"""Small bundled corpora for demos and smoke tests."""

DEMO_CORPUS = """
I want to eat a sandwich.
I want to eat a burger.
I want to eat a pizza.
I want to eat a sandwich for lunch.
I want to eat a pizza for lunch.
I want to drink a coffee.
Coffee is good for health.
Coffee is good for the heart.
Coffee is good for the brain.
Coffee is good for the body.
Coffee is good for the soul.
Sometimes coffee is hot.
Sometimes coffee is cold.
Sometimes coffee is sweet.
Sometimes coffee is bitter.
Peanuts, pasta, peanut butter.
"""

TECHNICAL_CORPUS = """
Python is a programming language that lets you work quickly.
Flask is a lightweight web framework for Python.
A web framework handles HTTP requests and responses.
Unit tests check small pieces of code in isolation.
Integration tests check that components work together.
A trie is a tree that stores words by their prefixes.
A bigram model counts pairs of consecutive words.
A trigram model counts triples of consecutive words.
"""

CORPORA = {
    "demo": DEMO_CORPUS,
    "technical": TECHNICAL_CORPUS,
}
