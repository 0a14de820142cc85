"""Look up the built-in sets by name and combine them."""

from japanese_codepoints import available_sets, get_codepoints

for name in available_sets():
    print(f"{name:28} {len(get_codepoints(name)):6,} code points")

name_field = get_codepoints("jisx0208.hiragana") | get_codepoints("jisx0208kanji.all")
print(name_field.all_excluded("やまだ 太郎!"))
