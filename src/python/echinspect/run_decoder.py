#!/usr/bin/env python3

"""Decode the ECH config list of a domain's HTTPS record, or of a pasted value."""

import argparse
import json
import logging
import sys

from .ech_common import *
from .ech_decode import decode_ech
from .doh_client import fetch_https_record
from .render import render_result, render_params

EXIT_OK = 0
EXIT_DECODE_FAILED = 1
EXIT_LOOKUP_FAILED = 2


def main(argv: list[str]|None = None) -> int:
    parser = argparse.ArgumentParser(
        description = 'Decode Encrypted Client Hello configs from DNS HTTPS records.',
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('domain', nargs='?',
        help='Look up the HTTPS record of this domain and decode its ech parameter')
    source.add_argument('-e', '--ech', metavar='BASE64',
        help='Decode this base64 ech value instead of looking one up; "-" reads stdin')
    parser.add_argument('-j', '--json', action='store_true',
        help='Print the decoded result as JSON')
    parser.add_argument('--doh-url', default=DOH_URL, metavar='URL',
        help=f'DNS-over-HTTPS JSON endpoint; default {DOH_URL}')
    parser.add_argument('-t', '--timeout', type=float, default=DOH_TIMEOUT)
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    record = None
    if args.ech is not None:
        ech = sys.stdin.read() if args.ech == '-' else args.ech
    else:
        try:
            record = fetch_https_record(args.domain, doh_url=args.doh_url, timeout=args.timeout)
        except DnsLookupError as e:
            logger.error(str(e))
            return EXIT_LOOKUP_FAILED
        if record.ech is None:
            if args.json:
                print(json.dumps({'record': record.jsonify(), 'result': None}, indent=2))
            else:
                print(render_params(record))
                print()
                print('No ech parameter in this record.')
            return EXIT_DECODE_FAILED
        ech = record.ech

    result = decode_ech(ech)

    if args.json:
        out = {'result': result.jsonify()}
        if record is not None:
            out['record'] = record.jsonify()
        print(json.dumps(out, indent=2))
    else:
        if record is not None:
            print(render_params(record))
            print()
        print(render_result(result))

    return EXIT_OK if result.ok else EXIT_DECODE_FAILED


if __name__ == '__main__':
    sys.exit(main())
