"""
Toolshop - storefront and admin console for an online tool shop
"""
