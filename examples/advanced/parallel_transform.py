"""Thread safe: transform 1000 articles in parallel."""

import json
from concurrent.futures import ThreadPoolExecutor

from external_bodyxml import transform

payloads = [
    json.dumps(
        {
            "type": "root",
            "body": {
                "type": "body",
                "children": [
                    {"type": "paragraph", "children": [{"type": "text", "value": f"Article {i}"}]}
                ],
            },
        }
    )
    for i in range(1000)
]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(transform, payloads))

print(f"Transformed {len(results)} articles in parallel")
print("First:", results[0])
print("Last:", results[-1])
