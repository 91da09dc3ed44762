"""Find marker-bounded regions in a few lines, zero config, zero deps."""

from tagscan import find_tags

source = "a = 1\n//<Custom>\nhand_written()\n//</Custom>\nb = 2\n"

for tag in find_tags(source, "//<Custom>", "//</Custom>"):
    print(tag.start_tag_index, tag.end_tag_index, repr(tag.inner_text))
