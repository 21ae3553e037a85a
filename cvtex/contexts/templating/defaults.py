"""
Default values for cvtex résumé records.

Provides the sample record used when no stored record exists, and the empty
templates used when the editor creates new entries.
"""

from typing import Any, Dict

# Sample résumé shown on first launch and restored by a reset
INITIAL_RESUME_DATA: Dict[str, Any] = {
    "profile": {
        "fullName": "Juan J. Desarrollador",
        "email": "hola@ejemplo.com",
        "phone": "+34 600 000 000",
        "location": "Madrid, España",
        "linkedin": "linkedin.com/in/juanjdev",
        "github": "github.com/juanjdev",
        "summary": (
            "Arquitecto de Software Senior especializado en Angular y Clean Code. "
            "Apasionado por construir aplicaciones web escalables con tecnologías modernas."
        ),
    },
    "experience": [
        {
            "id": "1",
            "role": "Desarrollador Angular Senior",
            "company": "Tech Solutions Inc.",
            "location": "Madrid",
            "startDate": "2022-01",
            "endDate": "Presente",
            "current": True,
            "duties": (
                "Lideré la migración de un monolito legacy a micro-frontends.\n"
                "Implementé gestión de estado usando Signals.\n"
                "Mentoricé a desarrolladores junior."
            ),
        }
    ],
    "education": [
        {
            "id": "1",
            "degree": "Grado en Ingeniería Informática",
            "institution": "Universidad Politécnica",
            "location": "Madrid",
            "graduationDate": "2018",
        }
    ],
    "projects": [
        {
            "id": "1",
            "name": "Sistema de Predicción con IA (Stacking)",
            "role": "Desarrollador ML",
            "stack": "Python, LSTM, XGBoost",
            "description": (
                "Colaboré en el desarrollo de una arquitectura de modelos híbrida (Stacking) "
                "para mejorar la precisión predictiva.\n"
                "Implementé el reentrenamiento y optimización de un modelo meta-learner para "
                "unificar las salidas de redes LSTM y algoritmos XGBoost."
            ),
            "keywords": "Machine Learning, Model Tuning, Data Analysis, Python",
            "link": "github.com/juanjdev/ai-stacking",
        },
        {
            "id": "2",
            "name": "Automatización de Workflows Corporativos",
            "role": "Ingeniero de Automatización",
            "stack": "n8n, Active Directory, PostgreSQL",
            "description": (
                "Diseñé y desplegué un flujo de trabajo complejo en n8n para la gestión "
                "automática de usuarios.\n"
                "Integré servicios de Active Directory con bases de datos PostgreSQL para "
                "sincronizar altas y bajas de empleados, reduciendo la carga manual operativa."
            ),
            "keywords": "Workflow Automation, Backend Integration, Scripting",
            "link": "",
        },
    ],
    "skills": ["Angular", "TypeScript", "Tailwind CSS", "RxJS", "Node.js", "Clean Architecture"],
}

# Field values for entries created from the editor's "add" buttons
NEW_EXPERIENCE_DEFAULTS = {
    "role": "Nuevo Rol",
    "company": "Empresa",
    "location": "",
    "startDate": "",
    "endDate": "",
    "current": False,
    "duties": "",
}

NEW_EDUCATION_DEFAULTS = {
    "degree": "Título",
    "institution": "Centro Educativo",
    "location": "",
    "graduationDate": "",
}

NEW_PROJECT_DEFAULTS = {
    "name": "Nuevo Proyecto",
    "role": "Rol",
    "stack": "Tech Stack",
    "description": "",
    "keywords": "",
    "link": "",
}
