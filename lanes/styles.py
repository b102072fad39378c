GLOBAL_CSS = """
<style>
:root {
  --font: 'Montserrat', system-ui, -apple-system, Segoe UI, Roboto, 'Helvetica Neue', Arial, sans-serif;
}
html, body, [class^="css"] { font-family: var(--font); }
.block-container { padding-top: 1.5rem; max-width: 1400px; }
.summary { color: #4b5563; margin-top: -0.75rem; }
.howto { padding: 1rem; background: #eff6ff; border-radius: 10px; color: #1d4ed8; font-size: 0.9rem; }
.howto b { color: #1e40af; }
</style>
"""
