#!/usr/bin/env python3
"""
Settings for talking to the Treasury savings bond calculator.

Values come from the environment, with `.env.local` loaded first:

    EE_CALCULATOR_URL   calculator endpoint
    EE_USER_AGENT       User-Agent header sent with each request
    EE_REQUEST_DELAY    seconds to wait between requests (default 0)
    EE_REQUEST_TIMEOUT  request timeout in seconds (default: none)
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_CALCULATOR_URL = "https://www.treasurydirect.gov/BC/SBCPrice"
DEFAULT_USER_AGENT = "EE-Values/1.0"


class CalculatorSettings(BaseModel):
    calculator_url: str = DEFAULT_CALCULATOR_URL
    user_agent: str = DEFAULT_USER_AGENT
    request_delay: float = 0.0
    request_timeout: Optional[float] = None


def load_settings(env_file: str = '.env.local') -> CalculatorSettings:
    """Build settings from the environment, reading `env_file` if it exists."""
    load_dotenv(env_file)

    values = {}
    if os.getenv('EE_CALCULATOR_URL'):
        values['calculator_url'] = os.getenv('EE_CALCULATOR_URL')
    if os.getenv('EE_USER_AGENT'):
        values['user_agent'] = os.getenv('EE_USER_AGENT')
    if os.getenv('EE_REQUEST_DELAY'):
        values['request_delay'] = os.getenv('EE_REQUEST_DELAY')
    if os.getenv('EE_REQUEST_TIMEOUT'):
        values['request_timeout'] = os.getenv('EE_REQUEST_TIMEOUT')

    return CalculatorSettings(**values)
