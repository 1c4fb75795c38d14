"""Django signals emitted by genesis-child.

These signals allow other apps (caching, auditing) to observe header style
output without hooking into the render path.
"""

from django.dispatch import Signal

# Sent after the custom header style block has been written to the document
# head. Receivers get keyword arguments:
#
#   sender  – the GenesisChild class
#   css     – str, the assembled CSS
#   html    – str, the escaped <style> element written to the head
header_style_rendered = Signal()
