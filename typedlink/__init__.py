"""
typed-link-field - typed link values for content-management fields.
"""
