"""
Initializes the 'src' directory as a Python package.

This lets the application package ('src.emojipick') be imported by the
entry point and scripts in the project root, such as 'main.py' and
'scripts/export_emoji_json.py', and by the test suite.
"""
