"""Export approved events from Airtable to events.json for the static site."""
