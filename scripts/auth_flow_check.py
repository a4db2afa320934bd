#!/usr/bin/env python3
"""Walk a running Chirpy server through the full session lifecycle.

register -> login -> authorized call -> refresh -> revoke -> refresh (must fail)
"""
import argparse
import json
import random
import string
from pathlib import Path
from typing import Any, Optional

import requests


def _rand_suffix(length: int = 8) -> str:
    return ''.join(random.choice(string.ascii_lowercase + string.digits) for _ in range(length))


def _safe_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _bearer(token: Optional[str]) -> dict:
    return {'Authorization': f"Bearer {token}"} if token else {}


def check_step(name: str, response: requests.Response, expected_status: int) -> dict:
    entry = {
        'step': name,
        'status': response.status_code,
        'expected': expected_status,
        'ok': response.status_code == expected_status,
    }
    if not entry['ok']:
        entry['error'] = (response.text or '')[:500]
    return entry


def summarize(base_url: str, results: list[dict]) -> dict:
    passed = len([item for item in results if item['ok']])
    return {
        'base_url': base_url,
        'total': len(results),
        'passed': passed,
        'failed': len(results) - passed,
        'results': results,
    }


def run_flow(session: requests.Session, api_url: str) -> list[dict]:
    email = f"check-{_rand_suffix()}@example.com"
    password = _rand_suffix(16)
    results = []

    register = session.post(f"{api_url}/users", json={'email': email, 'password': password})
    results.append(check_step('register', register, 201))

    wrong = session.post(f"{api_url}/login", json={'email': email, 'password': 'not-' + password})
    results.append(check_step('login_wrong_password', wrong, 401))

    login = session.post(f"{api_url}/login", json={'email': email, 'password': password})
    results.append(check_step('login', login, 200))
    body = _safe_json(login) or {}
    token = body.get('token')
    refresh_token = body.get('refresh_token')

    results.append(check_step('authorize', session.get(f"{api_url}/users/me", headers=_bearer(token)), 200))
    results.append(check_step('authorize_missing', session.get(f"{api_url}/users/me"), 401))

    refreshed = session.post(f"{api_url}/refresh", headers=_bearer(refresh_token))
    results.append(check_step('refresh', refreshed, 200))
    new_token = (_safe_json(refreshed) or {}).get('token')
    results.append(check_step('authorize_refreshed', session.get(f"{api_url}/users/me", headers=_bearer(new_token)), 200))

    results.append(check_step('revoke', session.post(f"{api_url}/revoke", headers=_bearer(refresh_token)), 204))
    results.append(check_step('refresh_revoked', session.post(f"{api_url}/refresh", headers=_bearer(refresh_token)), 401))
    return results


def main() -> int:
    parser = argparse.ArgumentParser(description='Session lifecycle check for a running Chirpy server')
    parser.add_argument('--base-url', default='http://127.0.0.1:8000')
    parser.add_argument('--prefix', default='/api/v1')
    parser.add_argument('--output', default=None)
    args = parser.parse_args()

    base_url = args.base_url.rstrip('/')
    session = requests.Session()
    try:
        results = run_flow(session, f"{base_url}{args.prefix}")
    except requests.RequestException as exc:
        print(f"Request failed: {exc}")
        return 1

    summary = summarize(base_url, results)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding='utf-8')

    for item in results:
        print(f"{'PASS' if item['ok'] else 'FAIL'} {item['step']} -> {item['status']}")
    print(f"Total: {summary['total']}, Passed: {summary['passed']}, Failed: {summary['failed']}")
    return 0 if summary['failed'] == 0 else 2


if __name__ == '__main__':
    raise SystemExit(main())
