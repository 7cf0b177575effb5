"""Gemini CLI client for sending text prompts to the model."""

import subprocess


DEFAULT_TIMEOUT = 60


def _run_gemini_cli(
    prompt: str,
    timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """
    Run Gemini CLI with a prompt and return raw output.

    Args:
        prompt: The prompt to send to Gemini.
        timeout: Timeout in seconds (default 60).

    Returns:
        The raw stdout from Gemini CLI.

    Raises:
        RuntimeError: If Gemini CLI is missing, fails, or times out.
    """
    cmd = [
        'gemini',
        '--allowed-mcp-server-names', 'none',
        '-o', 'text',
        prompt
    ]

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout
        )
        return result.stdout.strip()

    except FileNotFoundError as e:
        raise RuntimeError("Gemini CLI not found on PATH") from e
    except subprocess.TimeoutExpired:
        raise RuntimeError(f"Gemini CLI timed out after {timeout}s")
    except subprocess.CalledProcessError as e:
        raise RuntimeError(
            f"Gemini CLI failed with exit code {e.returncode}.\n"
            f"Stderr: {e.stderr}"
        ) from e


def process_prompt(
    prompt: str,
    timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """
    Process a simple text prompt using Gemini CLI.

    The prompt is sent as-is and the raw text response is returned.

    Args:
        prompt: The prompt to send to Gemini.
        timeout: Timeout in seconds (default 60).

    Returns:
        The text response from Gemini.

    Raises:
        RuntimeError: If Gemini CLI fails or times out.
    """
    return _run_gemini_cli(prompt, timeout=timeout)
