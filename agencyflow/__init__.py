"""agencyflow: multi-tenant agency work management with RACI task approvals."""
