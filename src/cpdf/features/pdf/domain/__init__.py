"""
Summary: Domain values for the PDF merge/compress feature.
Why: Keep request and report types free of prompt and subprocess concerns.
"""
