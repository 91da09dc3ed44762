"""Ignore markers that only appear inside string literals."""

from tagscan import count_quotations, find_tags, find_tags_quoted

source = 'print("<<not a region>>") <<real>> x = \'<<also quoted>>\' <<second>>'

print("plain:       ", [t.inner_text for t in find_tags(source, "<<", ">>")])
print("quote-aware: ", [t.inner_text for t in find_tags_quoted(source, "<<", ">>", "\"'")])
print("quoted spans:", [r.slice(source) for r in count_quotations(source, "\"'")])
