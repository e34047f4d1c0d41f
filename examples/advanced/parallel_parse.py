"""Thread safe — render 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from tinymark import render_markdown

docs = ["# Doc " + str(i) + "\n\nContent for document " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(render_markdown, docs))

print(f"Rendered {len(results)} documents in parallel")
print("First doc:", results[0])
print("Last doc:", results[-1])
