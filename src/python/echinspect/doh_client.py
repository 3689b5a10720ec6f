#!/usr/bin/env python3

"""Look up HTTPS resource records over DNS-over-HTTPS (JSON API)."""

import argparse
import json
import logging

import httpx

from .ech_common import *


@dataclass(frozen=True)
class HttpsRecord:
    domain: str
    data: str
    params: Mapping[str, str] = field(default_factory=dict)

    @property
    def ech(self) -> str|None:
        return self.params.get('ech')

    def jsonify(self) -> dict[str, Any]:
        return {'domain': self.domain, 'data': self.data, 'params': dict(self.params)}


def parse_svc_params(data: str) -> dict[str, str]:
    """key=value SvcParams out of the presentation form of an HTTPS record.

    `1 . alpn="h3,h2" ech=AEX+...` -> {'alpn': 'h3,h2', 'ech': 'AEX+...'}
    """
    params = {}
    for part in data.split(' '):
        if '=' in part:
            key, val = part.split('=', 1)
            params[key] = val.replace('"', '').replace("'", '')
    return params


def find_https_answer(domain: str, reply: Mapping[str, Any]) -> HttpsRecord:
    status = reply.get('Status')
    if status != 0:
        raise DnsLookupError(f"DNS query failed with status code: {status}")
    answers = reply.get('Answer') or []
    if not answers:
        raise DnsLookupError("No HTTPS records found for this domain.")
    for answer in answers:
        if answer.get('type') == HTTPS_RR_TYPE:
            data = answer.get('data', '')
            return HttpsRecord(domain=domain, data=data, params=parse_svc_params(data))
    raise DnsLookupError("No HTTPS record found in answer.")


def fetch_https_record(
    domain: str,
    client: httpx.Client|None = None,
    doh_url: str = DOH_URL,
    timeout: float = DOH_TIMEOUT,
) -> HttpsRecord:
    """Queries the resolver at doh_url for domain's HTTPS record.

    Pass client to reuse a connection pool (or a mock transport in tests).
    """
    logger.info(f'querying {doh_url} for HTTPS record of {domain}')
    params = {'name': domain, 'type': 'HTTPS'}
    headers = {'accept': 'application/dns-json'}
    try:
        if client is None:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.get(doh_url, params=params, headers=headers)
        else:
            response = client.get(doh_url, params=params, headers=headers, timeout=timeout)
        response.raise_for_status()
        reply = response.json()
    except httpx.HTTPStatusError as e:
        raise DnsLookupError(f"DNS-over-HTTPS request failed: HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise DnsLookupError(f"DNS-over-HTTPS request failed: {e}") from e
    except ValueError as e:
        raise DnsLookupError(f"DNS-over-HTTPS reply is not JSON: {e}") from e
    return find_https_answer(domain, reply)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(
        description = 'Fetch the HTTPS DNS record of a domain and print its SvcParams.',
    )
    parser.add_argument('domain')
    parser.add_argument('--doh-url', default=DOH_URL)
    parser.add_argument('-q', '--quiet', action='store_true')
    args = parser.parse_args()

    if not args.quiet:
        logger.setLevel(logging.INFO)

    record = fetch_https_record(args.domain, doh_url=args.doh_url)
    print(json.dumps(record.jsonify(), indent=2))
