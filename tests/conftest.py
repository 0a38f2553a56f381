"""
Pytest configuration and fixtures for PayStack client tests.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from paystack_api.client import PayStackClient
from paystack_api.transport import InMemoryHttpClient


TEST_API_KEY = "sk_test_0123456789abcdef"
BASE_URL = "https://api.paystack.co"


@pytest.fixture
def http():
    """Recording transport with no queued responses."""
    return InMemoryHttpClient()


@pytest.fixture
def client(http):
    """Client wired to the recording transport."""
    return PayStackClient(TEST_API_KEY, http=http)


@pytest.fixture
def transaction_payload():
    """A transaction as PayStack returns it from verify/fetch."""
    return {
        "id": 4099260516,
        "domain": "test",
        "status": "success",
        "reference": "re4lyvq3s3",
        "amount": 40333,
        "message": None,
        "gateway_response": "Successful",
        "paid_at": "2024-08-22T09:15:02.000Z",
        "createdAt": "2024-08-22T09:14:24.000Z",
        "channel": "card",
        "currency": "NGN",
        "ip_address": "197.210.54.33",
        "metadata": "",
        "fees": 10283,
        "fees_split": None,
        "customer": {
            "id": 181873746,
            "first_name": None,
            "last_name": None,
            "email": "demo@test.com",
            "customer_code": "CUS_1rkzaqsv4rrhqo6",
            "phone": None,
            "metadata": None,
            "risk_action": "default",
            "international_format_phone": None,
        },
        "authorization": {
            "authorization_code": "AUTH_uh8bcl3zbn",
            "bin": "408408",
            "last4": "4081",
            "exp_month": "12",
            "exp_year": "2030",
            "channel": "card",
            "card_type": "visa ",
            "bank": "TEST BANK",
            "country_code": "NG",
            "brand": "visa",
            "reusable": True,
            "signature": "SIG_yEXu7dLBeqG0kU7g95Ke",
            "account_name": None,
        },
        "plan": None,
        "split": {},
        "order_id": None,
    }


@pytest.fixture
def split_payload():
    """A transaction split as PayStack returns it."""
    return {
        "id": 142,
        "name": "Test Doc",
        "type": "percentage",
        "currency": "NGN",
        "integration": 428626,
        "domain": "test",
        "split_code": "SPL_e7jnRLtzla",
        "active": True,
        "bearer_type": "subaccount",
        "bearer_subaccount": 40809,
        "createdAt": "2020-06-30T11:42:29.150Z",
        "updatedAt": "2020-06-30T11:42:29.150Z",
        "is_dynamic": False,
        "subaccounts": [
            {
                "subaccount": {
                    "id": 40809,
                    "subaccount_code": "ACCT_z3x6z3nbo14xsil",
                    "business_name": "Business Name",
                    "description": "Business Description",
                    "primary_contact_name": None,
                    "primary_contact_email": None,
                    "primary_contact_phone": None,
                    "metadata": None,
                    "percentage_charge": 20,
                    "settlement_bank": "Business Name",
                    "account_number": "0123456047",
                },
                "share": 20,
            }
        ],
        "total_subaccounts": 1,
    }
