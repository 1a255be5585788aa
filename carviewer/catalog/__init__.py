"""
Catalog package.

Responsibilities:
- Describe the manufacturer, category and car model records served by the
  three catalog sources.
- Fetch one source at a time with a bounded timeout.
- Fan out the three fetches concurrently and merge them into one snapshot.
- Resolve model foreign keys for the rendering layer.
"""
