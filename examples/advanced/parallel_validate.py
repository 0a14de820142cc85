"""Shared sets are immutable, so threads can validate against them freely."""

from concurrent.futures import ThreadPoolExecutor

from japanese_codepoints import jisx0213kanji

names = ["山田", "𠀋", "髙橋", "Smith", "渡邊"] * 200

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(jisx0213kanji.kanji().contains, names))

print(f"Checked {len(results)} names in parallel")
print("Rejected:", sorted({n for n, ok in zip(names, results, strict=True) if not ok}))
