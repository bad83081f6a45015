"""Rule-based extractors over raw CV text: contact fields, skills, entries."""
