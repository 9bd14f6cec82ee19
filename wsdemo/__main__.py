"""Entry point for running wsdemo as a module.

This file allows wsdemo to be run with: python -m wsdemo
It's also the console script entry point. The gevent patch runs before the
app module and the gevent server are loaded; the ``wsdemo`` package itself,
and with it Flask, is already imported by then.
"""

from gevent import monkey

monkey.patch_all()

from wsdemo.app import main  # noqa: E402

if __name__ == "__main__":
    main()
