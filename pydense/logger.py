"""module for logging pydense container activity
"""
from datetime import datetime
import warnings
from .pydense_warnings import PydenseWarning
import copy


class Logger(object):
    """a basic class for logging events on `Matrix` and `Vector` instances.
        if filename is passed, then a file handle is opened.

    Args:
        filename (`str`): Filename to write logged events to. If False, no file will be created.
            If True, nothing is written to file but events are echoed to the screen.
        echo (`bool`):  Flag to cause logged events to be echoed to the screen.

    Example::

        log = pydense.Logger("pydense.log", echo=True)
        vec = pydense.Vector([1.0, 2.0], logger=log)
        vec.to_ascii("vec.dat")

    """

    def __init__(self, filename, echo=False):
        self.items = {}
        self.echo = bool(echo)
        self.f = None
        if filename == True:
            self.echo = True
            self.filename = None
        elif filename:
            self.filename = filename
            self.f = open(filename, "w")
            self.t = datetime.now()
            self.log("opening " + str(filename) + " for logging")
        else:
            self.filename = None

    def _write(self, s):
        if self.echo:
            print(s, end="")
        if self.f is not None:
            self.f.write(s)
            self.f.flush()

    def statement(self, phrase):
        """log a one-time statement

        Arg:
            phrase (`str`): statement to log

        """
        t = datetime.now()
        self._write(str(t) + " " + str(phrase) + "\n")

    def log(self, phrase):
        """log something that happened.

        Arg:
            phrase (`str`): statement to log

        Notes:
            The first time phrase is passed the start time is saved.
                The second time the phrase is logged, the elapsed time is written
        """
        t = datetime.now()
        if phrase in self.items.keys():
            s = (
                str(t)
                + " finished: "
                + str(phrase)
                + " took: "
                + str(t - self.items[phrase])
                + "\n"
            )
            self._write(s)
            self.items.pop(phrase)
        else:
            self._write(str(t) + " starting: " + str(phrase) + "\n")
            self.items[phrase] = copy.deepcopy(t)

    def warn(self, message):
        """write a warning to the log file.

        Arg:
            message (`str`): warning statement to log


        """
        s = str(datetime.now()) + " WARNING: " + message + "\n"
        self._write(s)
        warnings.warn(s, PydenseWarning)

    def lraise(self, message, exc=Exception):
        """log an exception, then raise it.  The log file stays open

        Arg:
            message (`str`): exception statement to log and raise
            exc (`type`): exception class to raise. Default is `Exception`

        """
        self._write(str(datetime.now()) + " ERROR: " + message + "\n")
        raise exc(message)

    def close(self):
        """close the log file handle, if one is open"""
        if self.f is not None:
            self.f.close()
            self.f = None
