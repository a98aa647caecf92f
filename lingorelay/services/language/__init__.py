"""Language detection, direction resolution and the translation session facade."""
