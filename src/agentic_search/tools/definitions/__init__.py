# Tool definitions package.
