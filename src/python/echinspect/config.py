"""Settings for the ECH inspector; each can be overridden from the environment."""

import os

__all__ = ['DEBUG', 'DOH_URL', 'DOH_TIMEOUT', 'HTTPS_RR_TYPE']

DEBUG: bool = os.environ.get('ECHINSPECT_DEBUG', '').lower() in ('1', 'true', 'yes')

# any resolver speaking the JSON DoH dialect (dns.google, cloudflare-dns.com/dns-query)
DOH_URL: str = os.environ.get('ECHINSPECT_DOH_URL', 'https://dns.google/resolve')

DOH_TIMEOUT: float = float(os.environ.get('ECHINSPECT_DOH_TIMEOUT', '10.0'))

HTTPS_RR_TYPE = 65 # RFC 9460
