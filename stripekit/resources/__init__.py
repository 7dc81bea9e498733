"""
Endpoint builders and response models, one module or package per Stripe resource.

- customer: customers, their balance transactions, payment methods and funding instructions
- payment_method: the PaymentMethod object
- product, price: the catalog
- login_link: Express Dashboard login links for connected accounts
- billing_portal, setup_attempt, treasury: shared schema objects
"""
