"""
Main CLI Entry Point
Command-line interface for registrar account and DNS management
(Porkbun, Name.com)
"""

import sys
import argparse
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.table import Table

from registrar.api import RegistrarError, get_registrar
from registrar.utils.config import get_settings
from registrar.utils.logger import get_logger, set_level

logger = get_logger("registrar.cli")

console = Console()

PROVIDERS = ["PORKBUN", "NAMECOM"]


def _print_table(title: str, columns: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    console.print(table)


def cmd_ping(args):
    """Check connectivity and credentials"""
    with get_registrar(args.provider) as client:
        response = client.ping()
        console.print(f"[green]{client.get_provider_name()} OK[/green]")
        for key, value in response.model_dump(exclude={"status"}).items():
            if value:
                console.print(f"  {key}: {value}")


def cmd_domain_list(args):
    """List owned domains"""
    logger.info("Fetching owned domains...")

    with get_registrar(args.provider) as client:
        domains = client.domains().list_domains()

    _print_table(
        f"Owned domains ({len(domains)})",
        ["Domain", "Status", "Expires"],
        [domain.as_row() for domain in domains]
    )


def cmd_dns_list(args):
    """List DNS records of a domain"""
    with get_registrar(args.provider) as client:
        records = client.dns(args.domain).list_records()

    _print_table(
        f"DNS records for {args.domain} ({len(records)})",
        ["ID", "Name", "Type", "Content", "TTL", "Priority"],
        [record.as_row() for record in records]
    )


def cmd_dns_create(args):
    """Create a DNS record"""
    with get_registrar(args.provider) as client:
        dns = client.dns(args.domain)
        request = dns.record_request(
            record_type=args.type,
            content=args.content,
            name=args.name,
            ttl=args.ttl,
            priority=args.priority
        )
        created = dns.create_record(request)

    console.print(f"[green]Created {args.type.upper()} record {created.id} on {args.domain}[/green]")


def cmd_dns_delete(args):
    """Delete a DNS record by id"""
    with get_registrar(args.provider) as client:
        client.dns(args.domain).delete_record(args.record_id)

    console.print(f"[green]Deleted record {args.record_id} on {args.domain}[/green]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Domain Registrar Management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check credentials of the configured registrar
  python main.py ping

  # List owned domains on Name.com
  python main.py --provider NAMECOM domain list

  # List DNS records
  python main.py dns list example.com

  # Create an A record for www
  python main.py dns create example.com A 203.0.113.10 --name www --ttl 600

  # Delete a record
  python main.py dns delete example.com 123456
        """
    )
    parser.add_argument("--provider", choices=PROVIDERS, help="Registrar (default: from config)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: LOG_LEVEL from config)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ==================== PING COMMAND ====================
    ping_parser = subparsers.add_parser("ping", help="Check connectivity and credentials")
    ping_parser.set_defaults(func=cmd_ping)

    # ==================== DOMAIN COMMAND ====================
    domain_parser = subparsers.add_parser("domain", help="Domain management")
    domain_subparsers = domain_parser.add_subparsers(dest="domain_command", help="Domain operations")

    # domain list
    list_parser = domain_subparsers.add_parser("list", help="List owned domains")
    list_parser.set_defaults(func=cmd_domain_list)

    # ==================== DNS COMMAND ====================
    dns_parser = subparsers.add_parser("dns", help="DNS record management")
    dns_subparsers = dns_parser.add_subparsers(dest="dns_command", help="DNS operations")

    # dns list
    dns_list_parser = dns_subparsers.add_parser("list", help="List DNS records")
    dns_list_parser.add_argument("domain", help="Domain name")
    dns_list_parser.set_defaults(func=cmd_dns_list)

    # dns create
    dns_create_parser = dns_subparsers.add_parser("create", help="Create a DNS record")
    dns_create_parser.add_argument("domain", help="Domain name")
    dns_create_parser.add_argument("type", help="Record type (A, AAAA, CNAME, MX, TXT, ...)")
    dns_create_parser.add_argument("content", help="Record value")
    dns_create_parser.add_argument("--name", help="Host label (default: apex)")
    dns_create_parser.add_argument("--ttl", type=int, help="Time to live in seconds")
    dns_create_parser.add_argument("--priority", type=int, help="Priority (MX/SRV)")
    dns_create_parser.set_defaults(func=cmd_dns_create)

    # dns delete
    dns_delete_parser = dns_subparsers.add_parser("delete", help="Delete a DNS record")
    dns_delete_parser.add_argument("domain", help="Domain name")
    dns_delete_parser.add_argument("record_id", type=int, help="Record id")
    dns_delete_parser.set_defaults(func=cmd_dns_delete)

    return parser


def main(argv: Optional[Sequence[str]] = None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(0)

    try:
        set_level(args.log_level or get_settings().log_level)
        args.func(args)
    except RegistrarError as e:
        logger.error(f"❌ {str(e)}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"❌ {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
