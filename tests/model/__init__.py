# topmark:header:start
#
#   project      : CMDA
#   file         : __init__.py
#   file_relpath : tests/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
