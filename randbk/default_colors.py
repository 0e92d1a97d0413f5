"""Default palette shipped with the package."""

EMBEDDED_COLORS = """\
#1d1f21
#282a36
#1e1e2e
#2e3440
#002b36
#1a1b26
#282828
#263238
#2d2a2e
#1b2b34
#2b213a
#1f2a1f
#2a1f1f
#16232e
#232136
#1c1c1c
"""
