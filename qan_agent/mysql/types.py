import math

from qan_agent.errors import VariableReadError


class Connector:
    """Base class for MySQL server connectors."""

    def connect(self) -> None:
        """Establish the connection.

        Raises:
            MySQLConnectionError: If the connection cannot be established
        """
        raise NotImplementedError

    def get_global_var_string(self, name: str) -> str:
        """Get the value of a global variable as text.

        Args:
            name: Global variable name, e.g. ``long_query_time``

        Returns:
            str: The variable value

        Raises:
            VariableReadError: If the variable is missing or cannot be read
        """
        raise NotImplementedError

    def get_global_var_number(self, name: str) -> float:
        """Get the value of a global variable as a number.

        Raises:
            VariableReadError: If the variable is missing, cannot be read or
                is not a finite number
        """
        value = self.get_global_var_string(name)
        try:
            number = float(value)
        except ValueError as e:
            raise VariableReadError(name, f"not a number: '{value}'") from e
        if not math.isfinite(number):
            raise VariableReadError(name, f"not a finite number: '{value}'")
        return number

    def close(self) -> None:
        """Release the connection, if any."""

    def __enter__(self) -> "Connector":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
