"""
Command line interface.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""
