"""Message type indicators defined by ISO 8583:1987."""

from enum import Enum


class MessageTypeIndicator(str, Enum):
    """Four-digit numeric code that gives the overall function of a message."""

    # Request from a point-of-sale terminal for authorization of a purchase.
    AUTHORIZATION_REQUEST = "0100"
    # Response to a point-of-sale terminal for authorization of a purchase.
    AUTHORIZATION_RESPONSE = "0110"
    # Sent when the point-of-sale device breaks down and a voucher is signed.
    AUTHORIZATION_ADVICE = "0120"
    # Repeat of an authorization advice that timed out.
    AUTHORIZATION_ADVICE_REPEAT = "0121"
    # Confirmation of receipt of an authorization advice.
    ISSUER_RESPONSE_TO_AUTHORIZATION_ADVICE = "0130"
    # An authorization response was received.
    AUTHORIZATION_POSITIVE_ACKNOWLEDGEMENT = "0180"
    # An authorization or reversal response was late or invalid.
    AUTHORIZATION_NEGATIVE_ACKNOWLEDGEMENT = "0190"
    # Request for funds, typically from an ATM or a PIN point-of-sale device.
    ACQUIRER_FINANCIAL_REQUEST = "0200"
    # Issuer response to a request for funds.
    ISSUER_RESPONSE_TO_FINANCIAL_REQUEST = "0210"
    # Completes a transaction started with an authorization request.
    ACQUIRER_FINANCIAL_ADVICE = "0220"
    # Repeat of a financial advice that timed out.
    ACQUIRER_FINANCIAL_ADVICE_REPEAT = "0221"
    # Confirmation of receipt of a financial advice.
    ISSUER_RESPONSE_TO_FINANCIAL_ADVICE = "0230"
    # File update/transfer advice.
    BATCH_UPLOAD = "0320"
    # File update/transfer advice response.
    BATCH_UPLOAD_RESPONSE = "0330"
    # Reverses a transaction.
    ACQUIRER_REVERSAL_REQUEST = "0400"
    # Response to a reversal request.
    ACQUIRER_REVERSAL_RESPONSE = "0410"
    ACQUIRER_REVERSAL_ADVICE = "0420"
    ACQUIRER_REVERSAL_ADVICE_RESPONSE = "0430"
    # Card acceptor reconciliation request response.
    BATCH_SETTLEMENT_RESPONSE = "0510"
    # Administrative data, often free-form, possibly a failure message.
    ADMINISTRATIVE_REQUEST = "0600"
    # Response to an administrative request.
    ADMINISTRATIVE_RESPONSE = "0610"
    # Administrative request with stronger delivery guarantees.
    ADMINISTRATIVE_ADVICE = "0620"
    # Response to an administrative advice.
    ADMINISTRATIVE_ADVICE_RESPONSE = "0630"
    # Terminal initialise request: echo test, logon, logoff and so on.
    NETWORK_MANAGEMENT_REQUEST = "0800"
    # Terminal initialise response: echo test, logon, logoff and so on.
    NETWORK_MANAGEMENT_RESPONSE = "0810"
    # Key change.
    NETWORK_MANAGEMENT_ADVICE = "0820"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)