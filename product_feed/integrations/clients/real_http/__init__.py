"""
Real HTTP product feed client.

Must implement the ProductSource interface and return data shaped according to
product_feed.integrations.contracts.
"""
