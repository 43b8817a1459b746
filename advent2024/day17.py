"""Chronospatial Computer: a tiny three-bit machine."""

from dataclasses import dataclass, field


@dataclass
class Computer:
    """Registers, program and instruction pointer of the machine."""

    a: int
    b: int
    c: int
    program: list = field(default_factory=list)
    ip: int = 0

    @property
    def halted(self):
        """True once the instruction pointer has left the program."""
        return self.ip >= len(self.program)

    def _combo(self):
        operand = self.program[self.ip + 1]
        if operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"unexpected combo operand {operand}")

    def step(self):
        """Execute one instruction; return the value it outputs, if any."""
        if self.halted:
            raise RuntimeError("the program has halted")

        opcode = self.program[self.ip]
        output = None
        jumped = False
        if opcode == 0:
            self.a >>= self._combo()
        elif opcode == 1:
            self.b ^= self.program[self.ip + 1]
        elif opcode == 2:
            self.b = self._combo() % 8
        elif opcode == 3:
            if self.a != 0:
                self.ip = self.program[self.ip + 1]
                jumped = True
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 5:
            output = self._combo() % 8
        elif opcode == 6:
            self.b = self.a >> self._combo()
        elif opcode == 7:
            self.c = self.a >> self._combo()
        else:
            raise ValueError(f"unexpected instruction {opcode}")

        if not jumped:
            self.ip += 2
        return output


def _field(line, prefix):
    if line is None or not line.startswith(prefix):
        raise ValueError(f"expected a line starting with {prefix!r}")
    return line[len(prefix):]


class Solution:
    """Initial register values and the program."""

    def __init__(self, text):
        lines = text.splitlines() + [None] * 5
        self.a = int(_field(lines[0], "Register A: "))
        self.b = int(_field(lines[1], "Register B: "))
        self.c = int(_field(lines[2], "Register C: "))
        if lines[3]:
            raise ValueError("expected a blank line after the registers")
        self.program = [int(s) for s in _field(lines[4], "Program: ").split(",")]

    def _computer(self, a=None):
        return Computer(self.a if a is None else a, self.b, self.c, list(self.program))

    def part1(self):
        """The program's output, comma separated."""
        computer = self._computer()
        output = []
        while not computer.halted:
            value = computer.step()
            if value is not None:
                output.append(value)
        return ",".join(map(str, output))

    def part2(self):
        """Lowest initial A for which the program outputs itself."""
        for a in range(8):
            result = self._search(a, 1)
            if result is not None:
                return result
        raise ValueError("None was ever found")

    def _search(self, a, target_length):
        computer = self._computer(a)
        output = []
        seen = set()
        while not computer.halted:
            value = computer.step()
            state = (computer.a, computer.b, computer.c, computer.ip)
            if state in seen:
                return None
            seen.add(state)
            if value is not None:
                output.append(value)

        if len(output) == target_length and self.program[-target_length:] == output:
            if target_length == len(self.program):
                return a
            for low in range(8):
                result = self._search((a << 3) + low, target_length + 1)
                if result is not None:
                    return result
        return None