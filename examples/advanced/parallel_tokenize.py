"""Scanners are single-use and share nothing, so tokenize 1000 blocks in parallel."""

from concurrent.futures import ThreadPoolExecutor

from markscan import tokenize

blocks = [f"name: block-{i}\nx = {i}\nprint(x)" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, blocks))

print(f"Tokenized {len(results)} blocks in parallel")
print("First block tokens:", len(results[0]))
print("Last block tokens:", len(results[-1]))
