"""Detection and merging of markdown tables split across page boundaries.

Submodules:
  patterns    -- compiled regex patterns for rows, separators, and lines
  schema      -- TableFragment, MergedTable, MergedPageContent Pydantic models
  detection   -- locate and parse table fragments in one page's text
  decision    -- can_merge_tables() predicate
  formatting  -- merge two fragments and render them as markdown
  pipeline    -- merge_tables_across_pages() sweep and Document-level entry point
"""
