"""
Service Layer - storefront business logic

Author: TM3
Date: 2026-10-19
"""
