"""Input/output around the core: definition records, prompting, rendering, reports."""
