"""
QuillCV bounded contexts.

- templating: resume record -> LaTeX document
"""
