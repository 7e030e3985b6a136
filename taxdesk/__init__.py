"""TaxDesk — deduction rules and dashboard statistics for a tax practice."""
