from __future__ import annotations

from typing import Any


DEFAULT_LANGUAGE = "fr"


CONTENT: dict[str, dict[str, Any]] = {
    "fr": {
        "data": {
            "packs": [
                {
                    "variant": "essentiel",
                    "title": "Découverte",
                    "price": "2 500€",
                    "price_value": 2500,
                    "description": "L’essentiel pour comprendre l’écosystème local.",
                    "features": [
                        "Accès salon Gulfood",
                        "Networking Event Standard",
                        "Visite guidée Expo City",
                        "Support logistique de base",
                        "Hôtel 4* (4 nuits)",
                    ],
                },
                {
                    "variant": "premium",
                    "title": "Business Class",
                    "price": "4 500€",
                    "price_value": 4500,
                    "description": "Pour les entrepreneurs prêts à signer des contrats.",
                    "features": [
                        "Tout du pack Découverte",
                        "Dîner de Gala Ambassade",
                        "3 RDV B2B qualifiés",
                        "Atelier \"Doing Business in Dubai\"",
                        "Hôtel 5* (6 nuits)",
                    ],
                },
                {
                    "variant": "elite",
                    "title": "Ambassadeur",
                    "price": "8 000€",
                    "price_value": 8000,
                    "description": "L’expérience diplomatique ultime pour dirigeants.",
                    "features": [
                        "Tout du pack Premium",
                        "Accès Lounge VIP",
                        "Rencontre privée avec l’Ambassadeur",
                        "Chauffeur privé 24/7",
                        "Mise en relation Gouvernementale",
                        "Suite Palace (7 nuits)",
                    ],
                },
            ],
            "testimonials": [
                {
                    "name": "Awa Koné",
                    "role": "CEO, Tech Africa",
                    "image": "https://images.unsplash.com/photo-1531123897727-8f129e1688ce?auto=format&fit=crop&q=80&w=200",
                    "quote": "Cette expédition a complètement transformé ma vision du business à Dubai. L'accès aux réseaux institutionnels via l'Ambassade était inestimable. En 6 jours, j'ai signé plus de partenariats qu'en 6 mois.",
                    "stats": {"partnerships": 7, "roi": "400%", "saved_months": 18},
                },
                {
                    "name": "Jean-Marc Diallo",
                    "role": "Directeur Export, AgriCorp",
                    "image": "https://images.unsplash.com/photo-1506277886164-e25aa3f4ef7f?auto=format&fit=crop&q=80&w=200",
                    "quote": "L'organisation était impeccable. Le badge 'Ambassade' ouvre des portes qui restent fermées aux touristes d'affaires classiques. Un investissement rentabilisé dès le 3ème jour.",
                    "stats": {"partnerships": 4, "roi": "250%", "saved_months": 12},
                },
                {
                    "name": "Sophie Morel",
                    "role": "Fondatrice, Luxe & Mode",
                    "image": "https://images.unsplash.com/photo-1487412720507-e7ab37603c6f?auto=format&fit=crop&q=80&w=200",
                    "quote": "Le niveau des interlocuteurs rencontrés lors du dîner de gala était exceptionnel. J'ai trouvé mon distributeur local grâce à cette mission diplomatique.",
                    "stats": {"partnerships": 2, "roi": "300%", "saved_months": 24},
                },
            ],
            "agenda": [
                {"day": "Jour 1", "title": "Arrivée & Installation", "time": "Toute la journée", "description": "Accueil VIP à l'aéroport, transfert en limousine vers l'hôtel. Cocktail de bienvenue sur le rooftop au coucher du soleil."},
                {"day": "Jour 2", "title": "Immersion Écosystème", "time": "09:00 - 18:00", "description": "Visite du Dubai Multi Commodities Centre (DMCC) et présentation des opportunités fiscales. Déjeuner au Burj Khalifa."},
                {"day": "Jour 3", "title": "Business Matching", "time": "10:00 - 16:00", "description": "Session de rencontres B2B ciblées avec des investisseurs locaux et partenaires potentiels. Soirée libre."},
                {"day": "Jour 4", "title": "Forum Diplomatique", "time": "19:00 - 23:00", "description": "Grand Dîner de Gala à la résidence de l'Ambassadeur. Networking de haut niveau avec la diaspora influente."},
                {"day": "Jour 5", "title": "Innovation Tour", "time": "09:00 - 15:00", "description": "Visite du Musée du Futur et des incubateurs technologiques. Atelier pratique sur l'implantation."},
                {"day": "Jour 6", "title": "Clôture & Détente", "time": "10:00 - 22:00", "description": "Matinée libre pour shopping ou RDV privés. Safari désert VIP et dîner bédouin de clôture."},
            ],
            "faqs": [
                {"q": "Le billet d'avion est-il inclus ?", "a": "Non, les vols ne sont pas inclus pour vous laisser le choix de la compagnie et des horaires. Cependant, nous avons des tarifs négociés avec Emirates."},
                {"q": "Ai-je besoin d'un visa ?", "a": "Oui, un visa est nécessaire. Notre équipe 'Conciergerie' s'occupe de toutes les démarches administratives pour vous dès votre inscription."},
                {"q": "Puis-je venir avec un associé ?", "a": "Absolument. Nous proposons un tarif 'Duo' préférentiel (-15% sur la 2ème personne) si vous partagez la même chambre."},
                {"q": "Quels secteurs d'activité sont concernés ?", "a": "L'expédition est multisectorielle, avec un focus particulier sur l'Agro-industrie, la Tech, l'Immobilier et le Luxe/Retail."},
            ],
        },
        "nav": {"home": "Accueil", "agenda": "Programme", "faq": "FAQ", "register": "S'inscrire"},
        "hero": {
            "badge": "Programme Officiel Ambassade Côte d'Ivoire",
            "title": "BUSINESS EXPEDITION DUBAÏ 2024",
            "subtitle": "Immersion exclusive sous patronage diplomatique pour l'élite entrepreneuriale.",
            "cta1": "Réserver ma place",
            "cta2": "Découvrir le programme",
        },
        "register": {
            "title": "Rejoignez l'Expédition",
            "personal_info": "Informations Personnelles",
            "program_choice": "Choix du Programme",
            "ready": "Dossier prêt à l'envoi",
            "labels": {
                "first_name": "Prénom",
                "last_name": "Nom",
                "email": "Email Professionnel",
                "phone": "Téléphone (WhatsApp)",
                "company": "Entreprise",
                "role": "Fonction",
                "visa": "Je souhaite que l'équipe gère ma demande de visa (+150€)",
                "message": "Message ou besoins spécifiques (Optionnel)",
            },
            "validation": {
                "required": "Ce champ est obligatoire.",
                "pack": "Veuillez sélectionner un pack pour continuer.",
            },
            "success": {
                "title": "Candidature Envoyée !",
                "message": "Félicitations, votre dossier a bien été enregistré. Notre comité de sélection reviendra vers vous sous 24h avec les instructions de paiement.",
            },
            "error": "Erreur lors de la sauvegarde.",
            "permission_error": "Enregistrement refusé par la base de données (permission refusée). Vérifiez la politique d'accès de la table des inscriptions.",
        },
        "admin": {
            "login": {"title": "Accès Administrateur", "error": "Mot de passe incorrect"},
            "status": {"pending": "En attente", "approved": "Validé", "rejected": "Refusé"},
            "confirm_delete": "Êtes-vous sûr de vouloir supprimer définitivement cette inscription ? Cette action est irréversible.",
            "confirm_reset": "Attention : Vous allez effacer TOUTES les données de la base. Voulez-vous continuer ?",
            "unsupported": "Opération non disponible avec ce stockage.",
            "no_data": "Aucune inscription trouvée.",
        },
    },
    "en": {
        "data": {
            "packs": [
                {
                    "variant": "essentiel",
                    "title": "Discovery",
                    "price": "2 500€",
                    "price_value": 2500,
                    "description": "Essentials to understand the local ecosystem.",
                    "features": [
                        "Gulfood Exhibition Access",
                        "Standard Networking Event",
                        "Expo City Guided Tour",
                        "Basic Logistics Support",
                        "4* Hotel (4 nights)",
                    ],
                },
                {
                    "variant": "premium",
                    "title": "Business Class",
                    "price": "4 500€",
                    "price_value": 4500,
                    "description": "For entrepreneurs ready to sign contracts.",
                    "features": [
                        "All Discovery Pack features",
                        "Embassy Gala Dinner",
                        "3 Qualified B2B Meetings",
                        "\"Doing Business in Dubai\" Workshop",
                        "5* Hotel (6 nights)",
                    ],
                },
                {
                    "variant": "elite",
                    "title": "Ambassador",
                    "price": "8 000€",
                    "price_value": 8000,
                    "description": "The ultimate diplomatic experience for executives.",
                    "features": [
                        "All Premium Pack features",
                        "VIP Lounge Access",
                        "Private Meeting with the Ambassador",
                        "24/7 Private Chauffeur",
                        "Government Relations Intro",
                        "Palace Suite (7 nights)",
                    ],
                },
            ],
            "testimonials": [
                {
                    "name": "Awa Koné",
                    "role": "CEO, Tech Africa",
                    "image": "https://images.unsplash.com/photo-1531123897727-8f129e1688ce?auto=format&fit=crop&q=80&w=200",
                    "quote": "This expedition completely transformed my vision of business in Dubai. Access to institutional networks via the Embassy was invaluable. In 6 days, I signed more partnerships than in 6 months.",
                    "stats": {"partnerships": 7, "roi": "400%", "saved_months": 18},
                },
                {
                    "name": "Jean-Marc Diallo",
                    "role": "Export Director, AgriCorp",
                    "image": "https://images.unsplash.com/photo-1506277886164-e25aa3f4ef7f?auto=format&fit=crop&q=80&w=200",
                    "quote": "The organization was impeccable. The 'Embassy' badge opens doors that remain closed to standard business tourists. An investment made profitable by the 3rd day.",
                    "stats": {"partnerships": 4, "roi": "250%", "saved_months": 12},
                },
                {
                    "name": "Sophie Morel",
                    "role": "Founder, Luxe & Mode",
                    "image": "https://images.unsplash.com/photo-1487412720507-e7ab37603c6f?auto=format&fit=crop&q=80&w=200",
                    "quote": "The level of interlocutors met during the gala dinner was exceptional. I found my local distributor thanks to this diplomatic mission.",
                    "stats": {"partnerships": 2, "roi": "300%", "saved_months": 24},
                },
            ],
            "agenda": [
                {"day": "Day 1", "title": "Arrival & Check-in", "time": "All Day", "description": "VIP Welcome at the airport, limousine transfer to the hotel. Welcome cocktail on the rooftop at sunset."},
                {"day": "Day 2", "title": "Ecosystem Immersion", "time": "09:00 - 18:00", "description": "Visit to Dubai Multi Commodities Centre (DMCC) and presentation of tax opportunities. Lunch at Burj Khalifa."},
                {"day": "Day 3", "title": "Business Matching", "time": "10:00 - 16:00", "description": "Targeted B2B meeting session with local investors and potential partners. Free evening."},
                {"day": "Day 4", "title": "Diplomatic Forum", "time": "19:00 - 23:00", "description": "Grand Gala Dinner at the Ambassador's residence. High-level networking with the influential diaspora."},
                {"day": "Day 5", "title": "Innovation Tour", "time": "09:00 - 15:00", "description": "Visit to the Museum of the Future and tech incubators. Practical workshop on business setup."},
                {"day": "Day 6", "title": "Closing & Leisure", "time": "10:00 - 22:00", "description": "Free morning for shopping or private meetings. VIP Desert Safari and closing Bedouin dinner."},
            ],
            "faqs": [
                {"q": "Is the flight ticket included?", "a": "No, flights are not included to let you choose your airline and schedule. However, we have negotiated rates with Emirates."},
                {"q": "Do I need a visa?", "a": "Yes, a visa is required. Our 'Concierge' team handles all administrative procedures for you upon registration."},
                {"q": "Can I come with a partner?", "a": "Absolutely. We offer a preferential 'Duo' rate (-15% on the 2nd person) if you share the same room."},
                {"q": "Which business sectors are concerned?", "a": "The expedition is multi-sectoral, with a special focus on Agro-industry, Tech, Real Estate, and Luxury/Retail."},
            ],
        },
        "nav": {"home": "Home", "agenda": "Agenda", "faq": "FAQ", "register": "Register"},
        "hero": {
            "badge": "Official Program Ivory Coast Embassy",
            "title": "BUSINESS EXPEDITION DUBAI 2024",
            "subtitle": "Exclusive immersion under diplomatic patronage for the entrepreneurial elite.",
            "cta1": "Book my spot",
            "cta2": "Discover the program",
        },
        "register": {
            "title": "Join the Expedition",
            "personal_info": "Personal Information",
            "program_choice": "Program Choice",
            "ready": "File ready for submission",
            "labels": {
                "first_name": "First Name",
                "last_name": "Last Name",
                "email": "Professional Email",
                "phone": "Phone (WhatsApp)",
                "company": "Company",
                "role": "Job Title",
                "visa": "I want the team to handle my visa request (+150€)",
                "message": "Message or specific needs (Optional)",
            },
            "validation": {
                "required": "This field is required.",
                "pack": "Please select a pack to continue.",
            },
            "success": {
                "title": "Application Sent!",
                "message": "Congratulations, your file has been recorded. Our selection committee will get back to you within 24h with payment instructions.",
            },
            "error": "Error saving data.",
            "permission_error": "The database refused the registration (permission denied). Check the access policy of the registrations table.",
        },
        "admin": {
            "login": {"title": "Administrator Access", "error": "Incorrect password"},
            "status": {"pending": "Pending", "approved": "Approved", "rejected": "Rejected"},
            "confirm_delete": "Are you sure you want to permanently delete this registration? This action cannot be undone.",
            "confirm_reset": "Warning: You are about to wipe ALL data from the database. Do you want to continue?",
            "unsupported": "Operation not supported by this storage backend.",
            "no_data": "No registrations found.",
        },
    },
}
