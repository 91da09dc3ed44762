"""Regenerate a file while keeping hand-written regions from the old version."""

from tagscan import divide, find_tags, replace_all

MARKERS = ("//<Custom>", "//</Custom>")

previous = """class Order {
    //<Custom>
    validate() { return this.total > 0; }
    //</Custom>
    id = 0;
}
"""

generated = """class Order {
    //<Custom>
    //</Custom>
    id = 0;
    total = 0;
}
"""

# Hand-written regions from the previous pass, in order.
kept = iter(tag.full_text for tag in find_tags(previous, *MARKERS, 0, "{}"))

template_tag = find_tags(generated, *MARKERS)[0]
merged = replace_all(generated, template_tag, lambda region: next(kept, region))
print(merged)

# Or walk the file segment by segment.
for segment in divide(merged, [MARKERS]):
    kind = "custom" if segment.is_tag else "generated"
    print(f"{kind:>9} [{segment.start}..{segment.end}]")
