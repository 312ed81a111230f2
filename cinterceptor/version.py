# Feeping Creaturism:
#
# this is the all important version number used by pip.
#
#
"""
Version History:

1.0.0    - 10/19/2026 initial birth as a pip package. Injects compiler_args.txt
           into the response file and hands over to the real compiler.

1.0.1    - 10/19/2026 exit codes preserved, including the ones from a compiler
           that dies on a signal.

1.0.2    - 10/19/2026 sanity checker, logging via CINTERCEPTOR_OUTPUT_LEVEL.

"""

cinterceptor_version = '1.0.2'
cinterceptor_date = 'October 19 2026'
