#!/usr/bin/env python
"""
Operator utility for the content generation service
- Check application health
- Show article statistics
- Truncate log files
"""

import argparse
from pathlib import Path

import requests

DEFAULT_BASE_URL = 'http://localhost:5000'


def check_health(base_url=DEFAULT_BASE_URL):
    """Print the health endpoint report"""
    try:
        response = requests.get(f"{base_url}/", timeout=10)
        response.raise_for_status()
        health_data = response.json()

        print(f"\n===== Application status ({health_data['timestamp']}) =====")
        print(f"Status: {health_data['status'].upper()}")
        print(f"Version: {health_data.get('version', 'unknown')}")

        print("\n----- Database -----")
        print(f"Connected: {health_data['database']['connected']}")
        print(f"Articles: {health_data['database']['articles_count']}")
        print(f"Job postings: {health_data['database']['job_postings_count']}")
        print(f"News summaries: {health_data['database']['news_summaries_count']}")

        print("\n----- Integrations -----")
        print(f"OpenAI configured: {health_data['config']['openai_api_configured']}")
        print(f"NewsAPI configured: {health_data['config']['news_api_configured']}")
        print(f"Hugging Face configured: {health_data['config']['huggingface_configured']}")

        return True
    except Exception as e:
        print(f"Health check failed: {e}")
        return False


def show_stats(base_url=DEFAULT_BASE_URL, status='published'):
    """Print aggregate article statistics"""
    try:
        response = requests.get(
            f"{base_url}/api/article/get",
            params={'status': status, 'limit': 1},
            timeout=10
        )
        response.raise_for_status()
        stats = response.json()['data']['stats']

        print(f"\n===== Articles ({status}) =====")
        print(f"Total: {stats['total']}")
        print(f"Average words: {stats['avgWordCount']}")
        print(f"Average read time: {stats['avgReadTime']} min")
        for content_type, count in sorted(stats['contentTypes'].items()):
            print(f"  {content_type}: {count}")
        for level, count in sorted(stats['difficultyLevels'].items()):
            print(f"  {level}: {count}")
        return True
    except Exception as e:
        print(f"Failed to fetch statistics: {e}")
        return False


def truncate_logs(logs_dir='logs', keep_lines=1000):
    """Keep only the last lines of every log file"""
    logs_dir = Path(logs_dir)
    if not logs_dir.exists():
        print("Log directory not found")
        return

    for log_file in logs_dir.glob('*.log'):
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                lines = f.readlines()[-keep_lines:]

            with open(log_file, 'w', encoding='utf-8') as f:
                f.writelines(lines)

            print(f"Log {log_file.name} truncated to {keep_lines} lines")
        except OSError as e:
            print(f"Error processing {log_file}: {e}")


def main():
    parser = argparse.ArgumentParser(description='Content generation service utility')
    parser.add_argument('--url', default=DEFAULT_BASE_URL, help='Base URL of the running service')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('health', help='Check application health')

    stats_parser = subparsers.add_parser('stats', help='Show article statistics')
    stats_parser.add_argument('--status', default='published',
                              help='Article status to report on (default: published)')

    logs_parser = subparsers.add_parser('logs', help='Truncate log files')
    logs_parser.add_argument('--dir', default='logs', help='Log directory (default: logs)')
    logs_parser.add_argument('--keep', type=int, default=1000,
                             help='Number of trailing lines to keep (default: 1000)')

    args = parser.parse_args()

    if args.command == 'health':
        check_health(args.url)
    elif args.command == 'stats':
        show_stats(args.url, args.status)
    elif args.command == 'logs':
        truncate_logs(args.dir, args.keep)
    else:
        parser.print_help()


if __name__ == '__main__':
    main()
