"""Static catalog of toolkit sub-commands.

Responsibilities:
- Expose the fixed, ordered list of recognized toolkit command names.
- Describe each command's positional arguments for help output and optional
  upstream validation. The resolver and invoker never consult this module.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models.datatypes import ToolArgument, ToolDefinition


_SIGNING_ALGORITHMS = ("ed25519", "ml-dsa", "falcon")

_AVAILABLE_COMMANDS: tuple[str, ...] = (
    "generate-wallet",
    "check-balance",
    "send",
    "sign",
    "verify",
    "encrypt",
    "hash",
    "multichain",
    "web2-identity",
    "web2-proxy",
    "network-info",
    "get-block",
    "get-mempool",
    "get-transaction",
    "get-nonce",
    "batch-sign",
    "config",
    "bridge",
)

_DEFINITIONS: dict[str, ToolDefinition] = {
    definition.command: definition
    for definition in (
        ToolDefinition(
            command="config",
            title="Configuration Manager",
            arguments=(
                ToolArgument(
                    "action",
                    kind="select",
                    required=True,
                    options=("show", "init", "apply-env", "use-config"),
                    help="Configuration action to perform",
                ),
            ),
        ),
        ToolDefinition(
            command="generate-wallet",
            title="Generate Wallet",
            arguments=(
                ToolArgument(
                    "entropy",
                    kind="select",
                    options=("128", "256"),
                    help="Entropy bits for wallet generation (optional)",
                ),
            ),
        ),
        ToolDefinition(
            command="check-balance",
            title="Check Balance",
            arguments=(
                ToolArgument(
                    "address",
                    required=True,
                    placeholder="demo1...",
                    help="Address to check balance for",
                ),
            ),
        ),
        ToolDefinition(
            command="send",
            title="Send Tokens",
            arguments=(
                ToolArgument(
                    "amount",
                    kind="number",
                    required=True,
                    placeholder="10.5",
                    help="Amount to send",
                ),
                ToolArgument(
                    "address",
                    required=True,
                    placeholder="demo1...",
                    help="Recipient address",
                ),
            ),
        ),
        ToolDefinition(
            command="sign",
            title="Sign Message",
            arguments=(
                ToolArgument(
                    "message",
                    required=True,
                    placeholder="Hello World",
                    help="Message to sign",
                ),
                ToolArgument(
                    "algorithm",
                    kind="select",
                    options=_SIGNING_ALGORITHMS,
                    help="Signing algorithm (default: ed25519)",
                ),
            ),
        ),
        ToolDefinition(
            command="verify",
            title="Verify Signature",
            arguments=(
                ToolArgument(
                    "message", required=True, placeholder="Hello World", help="Original message"
                ),
                ToolArgument(
                    "signature",
                    required=True,
                    placeholder="signature_hex",
                    help="Signature to verify",
                ),
                ToolArgument(
                    "pubkey", required=True, placeholder="public_key_hex", help="Public key"
                ),
                ToolArgument(
                    "algorithm",
                    kind="select",
                    options=_SIGNING_ALGORITHMS,
                    help="Verification algorithm",
                ),
            ),
        ),
        ToolDefinition(
            command="encrypt",
            title="Encrypt/Decrypt Data",
            arguments=(
                ToolArgument(
                    "operation",
                    kind="select",
                    required=True,
                    options=("encrypt", "decrypt"),
                    help="Operation to perform",
                ),
                ToolArgument(
                    "data",
                    kind="textarea",
                    required=True,
                    placeholder="Data to encrypt/decrypt",
                    help="Input data",
                ),
                ToolArgument(
                    "algorithm",
                    kind="select",
                    required=True,
                    options=("ml-kem-aes", "rsa"),
                    help="Encryption algorithm",
                ),
            ),
        ),
        ToolDefinition(
            command="hash",
            title="Hash Data",
            arguments=(
                ToolArgument(
                    "operation",
                    kind="select",
                    required=True,
                    options=("hash", "verify"),
                    help="Operation to perform",
                ),
                ToolArgument(
                    "data",
                    kind="textarea",
                    required=True,
                    placeholder="Data to hash",
                    help="Input data",
                ),
                ToolArgument(
                    "algorithm",
                    kind="select",
                    required=True,
                    options=("sha256", "sha3_512"),
                    help="Hash algorithm",
                ),
            ),
        ),
        ToolDefinition(
            command="multichain",
            title="Multichain Operations",
            arguments=(
                ToolArgument(
                    "operation",
                    kind="select",
                    required=True,
                    options=("balance", "wrapped"),
                    help="Multichain operation",
                ),
                ToolArgument(
                    "address", required=True, placeholder="0x...", help="Address to check"
                ),
                ToolArgument(
                    "chains",
                    placeholder="ethereum_mainnet,bitcoin_mainnet",
                    help="Comma-separated chain names (optional)",
                ),
            ),
        ),
        ToolDefinition(
            command="web2-identity",
            title="Web2 Identity",
            arguments=(
                ToolArgument(
                    "operation",
                    kind="select",
                    required=True,
                    options=("proof", "github", "twitter", "get"),
                    help="Identity operation",
                ),
                ToolArgument(
                    "username",
                    placeholder="username",
                    help="Username (for github/twitter)",
                ),
                ToolArgument("id", placeholder="user_id", help="User ID (for github/twitter)"),
            ),
        ),
        ToolDefinition(
            command="web2-proxy",
            title="Web2 Proxy",
            arguments=(
                ToolArgument(
                    "operation",
                    kind="select",
                    required=True,
                    options=("proxy", "tweet"),
                    help="Proxy operation",
                ),
                ToolArgument(
                    "url",
                    required=True,
                    placeholder="https://api.example.com",
                    help="URL to proxy",
                ),
                ToolArgument(
                    "method",
                    kind="select",
                    options=("GET", "POST", "PUT", "DELETE"),
                    help="HTTP method (default: GET)",
                ),
            ),
        ),
        ToolDefinition(command="network-info", title="Network Information"),
        ToolDefinition(command="get-block", title="Get Block"),
        ToolDefinition(command="get-mempool", title="Get Mempool"),
        ToolDefinition(
            command="get-transaction",
            title="Get Transaction",
            arguments=(
                ToolArgument(
                    "hash",
                    required=True,
                    placeholder="transaction_hash",
                    help="Transaction hash",
                ),
            ),
        ),
        ToolDefinition(
            command="get-nonce",
            title="Get Nonce",
            arguments=(
                ToolArgument(
                    "address",
                    required=True,
                    placeholder="demo1...",
                    help="Address to get nonce for",
                ),
            ),
        ),
        ToolDefinition(
            command="batch-sign",
            title="Batch Sign",
            arguments=(
                ToolArgument(
                    "messages",
                    kind="textarea",
                    required=True,
                    placeholder="message1\\nmessage2\\nmessage3",
                    help="Messages to sign (one per line)",
                ),
                ToolArgument(
                    "algorithm",
                    kind="select",
                    options=_SIGNING_ALGORITHMS,
                    help="Signing algorithm (default: ed25519)",
                ),
            ),
        ),
        ToolDefinition(
            command="bridge",
            title="Bridge Assets",
            arguments=(
                ToolArgument(
                    "operation",
                    kind="select",
                    required=True,
                    options=("rubic", "native", "options"),
                    help="Bridge operation",
                ),
            ),
        ),
    )
}


def available_commands() -> list[str]:
    """Return recognized toolkit command names in catalog order."""

    return list(_AVAILABLE_COMMANDS)


def tool_definition(command: str) -> ToolDefinition:
    """Return the argument definition for one command.

    Raises:
        KeyError: If the command is not in the catalog.
    """

    try:
        return _DEFINITIONS[command]
    except KeyError as exc:
        raise KeyError(f"Unknown toolkit command `{command}`.") from exc


def validate_arguments(command: str, args: Sequence[str]) -> list[str]:
    """Return human-readable problems with positional arguments for a command.

    Arguments map onto definitions by position. An empty list means the
    arguments look usable; the toolkit still performs its own parsing.
    """

    if command not in _DEFINITIONS:
        known = ", ".join(_AVAILABLE_COMMANDS)
        return [f"Unknown command `{command}`; known commands: {known}."]

    definition = _DEFINITIONS[command]
    problems: list[str] = []
    for index, argument in enumerate(definition.arguments):
        if index >= len(args):
            if argument.required:
                problems.append(f"Missing required argument `{argument.name}`.")
            continue
        value = args[index]
        if argument.kind == "select" and argument.options and value not in argument.options:
            allowed = ", ".join(argument.options)
            problems.append(
                f"Argument `{argument.name}` must be one of: {allowed} (got `{value}`)."
            )
        if argument.kind == "number" and not _is_number(value):
            problems.append(f"Argument `{argument.name}` must be a number (got `{value}`).")

    extra_count = len(args) - len(definition.arguments)
    if extra_count > 0:
        problems.append(
            f"Command `{command}` accepts at most {len(definition.arguments)} "
            f"argument(s); got {len(args)}."
        )
    return problems


def _is_number(value: str) -> bool:
    """Return whether a value parses as a decimal number."""

    try:
        float(value)
    except ValueError:
        return False
    return True
