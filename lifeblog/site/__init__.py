"""
Site generation: Markdown rendering, head metadata, templates and the builder.
"""
