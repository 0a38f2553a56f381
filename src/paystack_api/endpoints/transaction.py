"""
Transaction endpoints.

The transaction route creates and manages payments on the integration:
initializing checkouts, verifying and listing payments, charging saved
authorizations and exporting transaction history.
"""

from typing import List, Optional

from aws_lambda_powertools import Logger

from paystack_api.endpoints.base import BaseEndpoint, build_query
from paystack_api.errors import PayStackValidationError
from paystack_api.models.enums import Currency, TransactionStatus
from paystack_api.models.response import PayStackResponse
from paystack_api.models.transaction import (
    ChargeRequest,
    ExportTransactionData,
    PartialDebitRequest,
    TransactionData,
    TransactionInitData,
    TransactionRequest,
    TransactionTimelineData,
    TransactionTotalsData,
)
from paystack_api.utils import mask_email


logger = Logger(child=True)


class TransactionEndpoints(BaseEndpoint):
    """
    Operations on ``/transaction``.

    Example:
        request = (
            TransactionRequestBuilder()
            .amount("10000")
            .email("customer@example.com")
            .currency(Currency.NGN)
            .build()
        )
        response = client.transaction.initialize_transaction(request)
        print(response.data.authorization_url)
    """

    resource_path = "/transaction"

    DEFAULT_PER_PAGE = 10

    def initialize_transaction(self, request: TransactionRequest) -> PayStackResponse[TransactionInitData]:
        """
        Initialize a transaction and get a checkout URL for the customer.

        Args:
            request: Finalized transaction request

        Returns:
            Response carrying the authorization URL, access code and reference
        """
        logger.info(
            "Initializing PayStack transaction",
            extra={
                "reference": request.reference,
                "amount": request.amount,
                "email": mask_email(request.email),
            },
        )
        return self._post(self._url("initialize"), TransactionInitData, request)

    def verify_transaction(self, reference: str) -> PayStackResponse[TransactionData]:
        """
        Confirm the status of a transaction.

        Args:
            reference: Reference used when the transaction was initialized
        """
        logger.info("Verifying transaction", extra={"reference": reference})
        return self._get(self._url("verify", reference), TransactionData)

    def list_transactions(
        self,
        per_page: Optional[int] = None,
        status: Optional[TransactionStatus] = None,
    ) -> PayStackResponse[List[TransactionData]]:
        """
        List transactions carried out on the integration.

        Args:
            per_page: Number of transactions to return, 10 when omitted
            status: Status filter, ``success`` when omitted
        """
        query = build_query(
            perPage=self.DEFAULT_PER_PAGE if per_page is None else per_page,
            status=TransactionStatus.SUCCESS if status is None else status,
        )
        return self._get(self._url(), List[TransactionData], query)

    def fetch_transaction(self, transaction_id: int) -> PayStackResponse[TransactionData]:
        """Get details of a transaction by its numeric ID."""
        return self._get(self._url(transaction_id), TransactionData)

    def charge_authorization(self, request: ChargeRequest) -> PayStackResponse[TransactionData]:
        """Charge a reusable authorization saved from an earlier payment."""
        logger.info(
            "Charging authorization",
            extra={"amount": request.amount, "email": mask_email(request.email)},
        )
        return self._post(self._url("charge_authorization"), TransactionData, request)

    def view_transaction_timeline(
        self,
        transaction_id: Optional[int] = None,
        reference: Optional[str] = None,
    ) -> PayStackResponse[TransactionTimelineData]:
        """
        View the timeline of a transaction.

        Exactly one of ``transaction_id`` or ``reference`` must be given.

        Raises:
            PayStackValidationError: If neither or both identifiers are given
        """
        if (transaction_id is None) == (reference is None):
            raise PayStackValidationError(
                "Transaction id or reference is needed to view the transaction timeline",
                field="transaction_id",
            )
        identifier = transaction_id if transaction_id is not None else reference
        return self._get(self._url("timeline", identifier), TransactionTimelineData)

    def total_transactions(self) -> PayStackResponse[TransactionTotalsData]:
        """Total amount received on the integration."""
        return self._get(self._url("totals"), TransactionTotalsData)

    def export_transaction(
        self,
        status: Optional[TransactionStatus] = None,
        currency: Optional[Currency] = None,
        settled: Optional[bool] = None,
    ) -> PayStackResponse[ExportTransactionData]:
        """
        Export transactions carried out on the integration.

        Args:
            status: Status of the transactions to export, ``success`` when omitted
            currency: Currency of the transactions to export, NGN when omitted
            settled: Only settled (True) or unsettled (False) transactions
        """
        query = build_query(
            status=TransactionStatus.SUCCESS if status is None else status,
            currency=Currency.NGN if currency is None else currency,
            settled=settled,
        )
        return self._get(self._url("export"), ExportTransactionData, query)

    def partial_debit(self, request: PartialDebitRequest) -> PayStackResponse[TransactionData]:
        """Retrieve part of a payment from a customer's saved authorization."""
        return self._post(self._url("partial_debit"), TransactionData, request)
