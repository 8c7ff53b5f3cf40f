#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Network Utils - port lookup for the Gradio server
"""

import socket
import random
from typing import Optional, Tuple


class NetworkUtils:
    """Network helpers"""

    @staticmethod
    def is_port_available(port: int, host: str = "0.0.0.0") -> bool:
        """
        Check whether a port can be bound.

        Args:
            port (int): port number
            host (str): interface to bind

        Returns:
            bool: whether the port is free
        """
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            try:
                s.bind((host, port))
                return True
            except OSError:
                return False

    @staticmethod
    def find_free_port(port_range: Tuple[int, int] = (7860, 7865)) -> Optional[int]:
        """
        Pick a free port from the half-open range [start, end).

        Args:
            port_range (Tuple[int, int]): (start, end)

        Returns:
            Optional[int]: a free port, or None when every port is taken
        """
        start, end = port_range
        ports = list(range(start, end))
        random.shuffle(ports)

        for port in ports:
            if NetworkUtils.is_port_available(port):
                return port
        return None
