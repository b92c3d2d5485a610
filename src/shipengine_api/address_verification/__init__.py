from .verification_result import VerificationMessage, VerificationResult

__all__ = ['VerificationMessage', 'VerificationResult']
