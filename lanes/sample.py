# Demo items loaded on first run and on reset.
SAMPLE_ITEMS = [
    {"id": 1, "name": "First item", "start": "2021-01-14", "end": "2021-01-22"},
    {"id": 2, "name": "Second item", "start": "2021-01-18", "end": "2021-01-31"},
    {"id": 3, "name": "Another item", "start": "2021-02-02", "end": "2021-02-08"},
    {"id": 4, "name": "Another item", "start": "2021-01-06", "end": "2021-01-13"},
    {"id": 5, "name": "Third item", "start": "2021-01-01", "end": "2021-01-05"},
    {"id": 6, "name": "Very long name for a very short item", "start": "2021-02-01", "end": "2021-02-01"},
    {"id": 7, "name": "Item 7", "start": "2021-01-12", "end": "2021-01-12"},
    {"id": 8, "name": "Design review", "start": "2021-02-05", "end": "2021-02-19"},
    {"id": 9, "name": "Beta rollout", "start": "2021-02-15", "end": "2021-03-05"},
    {"id": 10, "name": "Launch prep", "start": "2021-02-20", "end": "2021-02-26"},
    {"id": 11, "name": "Retrospective", "start": "2021-03-08", "end": "2021-03-08"},
]
