"""Static vocabulary: skill taxonomy and default section headings."""
